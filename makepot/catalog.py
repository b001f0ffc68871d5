from .message import CatalogEntry


class Catalog:
    """
    Translations keyed by context ("" for none) and then by msgid.

    The first comment recorded for a message is kept first, later ones
    are appended when they differ. Every reference is kept in the order
    it was added.
    """

    def __init__(self):
        self.translations = {}

    def add(self, occurrence):
        context, message_id = occurrence.key
        bucket = self.translations.setdefault(context, {})
        entry = bucket.get(message_id)
        if entry is None:
            entry = CatalogEntry(message_id=message_id,
                                 message_context=context)
            bucket[message_id] = entry

        comment = occurrence.translator_comment
        if comment and comment not in entry.comments:
            entry.comments.append(comment)
        if occurrence.source_reference:
            entry.references.append(occurrence.source_reference)
        if occurrence.message_plural and not entry.message_plural:
            entry.message_plural = occurrence.message_plural
        return entry

    def merge(self, occurrences):
        for occurrence in occurrences:
            self.add(occurrence)
        return self

    def get(self, message_id, context=""):
        return self.translations.get(context or "", {}).get(message_id)

    def entries(self):
        """Yield every entry, contexts and messages in insertion order."""
        for bucket in self.translations.values():
            yield from bucket.values()

    def keys(self):
        return [(entry.message_context, entry.message_id)
                for entry in self.entries()]

    def __len__(self):
        return sum(len(bucket) for bucket in self.translations.values())

    def __contains__(self, key):
        context, message_id = key
        return self.get(message_id, context) is not None
