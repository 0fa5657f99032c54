"""
Knowledge File Parser
=====================

Responsible for parsing ``tag : text`` lines into KnowledgeEntry objects.
"""

import logging
import re
from typing import List, Optional
from knowledge_base.core import DELIMITER, KnowledgeEntry

log = logging.getLogger(__name__)


class KnowledgeParser:
    """Parses the line-oriented knowledge file format."""

    def __init__(self, content: str):
        self.content = content
        self.entries: List[KnowledgeEntry] = []
        self.skipped: int = 0

    def parse(self) -> List[KnowledgeEntry]:
        """Parse every line and return the well-formed entries."""
        self.entries = []
        self.skipped = 0

        for lineno, line in enumerate(self._lines(), start=1):
            entry = self._parse_line(line)
            if entry is None:
                log.debug("Skipping malformed line %d: %r", lineno, line)
                self.skipped += 1
                continue
            self.entries.append(entry)

        return self.entries

    def _lines(self) -> List[str]:
        """Split on CR, LF or CRLF only; other Unicode line breaks stay in the text."""
        lines = re.split(r"\r\n|\r|\n", self.content)
        if lines and lines[-1] == "":
            lines.pop()
        return lines

    def _parse_line(self, line: str) -> Optional[KnowledgeEntry]:
        """Split a line on the first delimiter; None if it has none."""
        parts = line.split(DELIMITER, 1)
        if len(parts) < 2:
            return None

        tag = parts[0].strip()
        if not tag:
            return None
        return KnowledgeEntry(tag=tag, text=parts[1].strip())
