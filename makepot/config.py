from dataclasses import dataclass, field
import os
from typing import Dict, List, Optional

from .helper import string_to_list


class MakePotException(Exception):
    pass


DEFAULT_EXCLUDE = ["node_modules", "vendor", ".git"]


@dataclass
class MakePotConfig:
    slug: str
    source_dir: str = "."
    destination: Optional[str] = None
    domain: Optional[str] = None
    include: List[str] = field(default_factory=list)
    exclude: List[str] = field(default_factory=list)
    headers: Dict[str, str] = field(default_factory=dict)
    reference: Optional[str] = None
    skip_js: bool = False
    skip_json: bool = False
    skip_readme: bool = False

    def __post_init__(self):
        if not self.slug:
            raise MakePotException("Have to specify the project slug.")
        self.source_dir = os.path.normpath(self.source_dir)
        if self.destination is None:
            self.destination = os.path.join(
                self.source_dir, "languages", f"{self.slug}.pot")
        self.include = string_to_list(self.include)
        self.exclude = string_to_list(self.exclude)

    @classmethod
    def from_options(cls, options):
        source_dir = options.source_dir or "."
        slug = options.slug or os.path.basename(os.path.abspath(source_dir))
        headers = {
            "author": options.author,
            "email": options.email,
            "license": options.license,
            "name": options.package_name,
            "version": options.package_version,
        }
        return cls(
            slug=slug,
            source_dir=source_dir,
            destination=options.destination,
            domain=options.domain,
            include=options.include or [],
            exclude=options.exclude or [],
            headers=dict((k, v) for k, v in headers.items() if v),
            reference=options.reference,
            skip_js=options.skip_js,
            skip_json=options.skip_json,
            skip_readme=options.skip_readme)
