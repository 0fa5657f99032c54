"""
Knowledge Persistence
=====================

Loads and saves a KnowledgeStore, orchestrating the parser and formatter.
"""

import logging
from pathlib import Path
from typing import Optional, Union
from knowledge_base.core import KnowledgeEntry
from knowledge_base.core.errors import PersistenceError
from knowledge_base.core.formatter import KnowledgeFormatter
from knowledge_base.core.parser import KnowledgeParser
from knowledge_base.core.store import KnowledgeStore

log = logging.getLogger(__name__)

PathLike = Union[str, Path]


class KnowledgeFile:
    """A knowledge file on disk."""

    def __init__(
        self,
        path: PathLike,
        formatter: Optional[KnowledgeFormatter] = None
    ):
        """
        Args:
            path: Location of the file
            formatter: Optional custom formatter (defaults to KnowledgeFormatter)
        """
        self.path = Path(path)
        self.formatter = formatter or KnowledgeFormatter()

    def exists(self) -> bool:
        return self.path.exists()

    def load(self) -> KnowledgeStore:
        """Read the file into a new store.

        Raises:
            PersistenceError: If the file cannot be opened, read or decoded
        """
        try:
            content = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise PersistenceError(f"Cannot read {self.path}: {e}", self.path) from e

        parser = KnowledgeParser(content)
        store = KnowledgeStore()
        for entry in parser.parse():
            store.put(entry.tag, entry.text)

        log.info(
            "Loaded %d tags from %s (%d lines skipped)",
            len(store), self.path, parser.skipped
        )
        return store

    def save(self, store: KnowledgeStore) -> Path:
        """Write every entry of the store, replacing the file.

        Raises:
            PersistenceError: If the file cannot be written
        """
        entries = [KnowledgeEntry(tag=tag, text=text) for tag, text in store.items()]
        content = self.formatter.format_entries(entries)

        try:
            with open(self.path, "w", encoding="utf-8") as f:
                f.write(content)
        except OSError as e:
            raise PersistenceError(f"Cannot write {self.path}: {e}", self.path) from e

        log.info("Saved %d tags to %s", len(entries), self.path.resolve())
        return self.path


def save(store: KnowledgeStore, path: PathLike) -> Path:
    """Write a store to path in ``tag : text`` format."""
    return KnowledgeFile(path).save(store)


def load(path: PathLike) -> KnowledgeStore:
    """Read a store from path; a missing file is a PersistenceError."""
    return KnowledgeFile(path).load()


def load_or_empty(path: PathLike) -> KnowledgeStore:
    """Read a store from path, or return an empty store if the file is absent."""
    knowledge_file = KnowledgeFile(path)
    if not knowledge_file.exists():
        log.info("No knowledge file at %s, starting empty", knowledge_file.path)
        return KnowledgeStore()
    return knowledge_file.load()
