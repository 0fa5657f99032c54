"""
Undo Log
========

Last-in-first-out record of deleted tags. Only the tag is kept; the text it
held is gone once the tag is deleted.
"""

from typing import List, Optional


class UndoLog:
    """Stack of deleted tags."""

    def __init__(self):
        self._deleted: List[str] = []

    def push_deletion(self, tag: str) -> None:
        """Record a tag as the most recently deleted."""
        self._deleted.append(tag)

    def pop_deletion(self) -> Optional[str]:
        """Remove and return the most recently deleted tag, or None if empty."""
        if not self._deleted:
            return None
        return self._deleted.pop()

    def peek(self) -> Optional[str]:
        return self._deleted[-1] if self._deleted else None

    def clear(self) -> None:
        self._deleted.clear()

    def __len__(self) -> int:
        return len(self._deleted)

    def __bool__(self) -> bool:
        return bool(self._deleted)
