"""
Knowledge File Formatter
========================

Responsible for formatting KnowledgeEntry objects into ``tag : text`` lines.
"""

import logging
from typing import Iterable
from knowledge_base.core import DELIMITER, KnowledgeEntry

log = logging.getLogger(__name__)


class KnowledgeFormatter:
    """Formats entries as one line each."""

    @staticmethod
    def format_entries(entries: Iterable[KnowledgeEntry]) -> str:
        """Convert entries to the file format, newline-terminated per entry."""
        lines = []
        for entry in entries:
            if entry.is_lossy():
                log.warning(
                    "Entry %r contains the delimiter, a newline or padding; "
                    "it will not load back unchanged",
                    entry.tag
                )
            lines.append(KnowledgeFormatter.format_entry(entry))
        return "".join(lines)

    @staticmethod
    def format_entry(entry: KnowledgeEntry) -> str:
        return f"{entry.tag}{DELIMITER}{entry.text}\n"
