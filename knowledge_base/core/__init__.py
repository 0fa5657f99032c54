"""
Core Knowledge Components
=========================

This module contains the core components:
- store: Tag to knowledge mapping
- undo: Undo log of deleted tags
- tags: Tag selection resolution
- parser / formatter: The ``tag : text`` line format
- persistence: Loading and saving stores to disk
- models: Data models (KnowledgeEntry, etc.)
"""

from dataclasses import dataclass

# Separates the tag from the knowledge text on each persisted line.
DELIMITER = " : "


@dataclass
class KnowledgeEntry:
    """A single tag with its knowledge text."""
    tag: str
    text: str

    def is_lossy(self) -> bool:
        """True if this entry cannot survive a save/load round-trip unchanged."""
        return (
            DELIMITER in self.tag
            or self.tag.endswith(DELIMITER.rstrip())
            or "\n" in self.tag
            or "\r" in self.tag
            or "\n" in self.text
            or "\r" in self.text
            or self.tag != self.tag.strip()
            or self.text != self.text.strip()
        )
