from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class TranslationOccurrence:
    message_id: str
    message_context: Optional[str] = None
    translator_comment: Optional[str] = None
    source_reference: Optional[str] = None
    message_plural: Optional[str] = None

    @property
    def key(self):
        return (self.message_context or "", self.message_id)


@dataclass
class CatalogEntry:
    message_id: str
    message_context: str = ""
    message_plural: str = ""
    comments: List[str] = field(default_factory=list)
    references: List[str] = field(default_factory=list)


@dataclass
class CatalogRecord:
    msgid: str
    msgstr: str
    msgctxt: str
    comments: str
    translation_key: str
