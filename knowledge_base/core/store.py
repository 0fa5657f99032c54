"""
Knowledge Store
===============

Owns the mapping from tag to knowledge text.
"""

from typing import Dict, Iterator, List, Optional, Tuple
from knowledge_base.core.errors import EmptyInputError


class KnowledgeStore:
    """Tag to knowledge mapping that remembers first-insertion order."""

    def __init__(self):
        # dict preserves insertion order; overwriting a key keeps its position
        self._entries: Dict[str, str] = {}

    def put(self, tag: str, text: str) -> None:
        """Insert or overwrite the knowledge for a tag.

        Args:
            tag: Tag name, trimmed before use
            text: Knowledge text

        Raises:
            ValueError: If the tag is blank after trimming
        """
        tag = tag.strip()
        if not tag:
            raise ValueError("Tag must not be empty")
        self._entries[tag] = text

    def remove(self, tag: str) -> Optional[str]:
        """Remove a tag and return its text, or None if it was not present."""
        return self._entries.pop(tag, None)

    def get(self, tag: str) -> Optional[str]:
        return self._entries.get(tag)

    def tags(self) -> List[str]:
        """All tags in insertion order."""
        return list(self._entries)

    def items(self) -> List[Tuple[str, str]]:
        return list(self._entries.items())

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, tag: object) -> bool:
        return tag in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self.tags())

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"KnowledgeStore({len(self)} tags)"


def require_text(text: Optional[str]) -> str:
    """Return text unchanged, or raise EmptyInputError if it is blank."""
    if not text or not text.strip():
        raise EmptyInputError()
    return text
