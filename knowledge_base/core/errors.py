"""
Knowledge Errors
================

Exceptions raised by the core components. Missing tags and an empty undo
log are not errors: the store and undo log return ``None`` for those.
"""

from pathlib import Path
from typing import Optional, Union


class KnowledgeBaseError(Exception):
    """Base class for all knowledge base errors."""


class EmptyInputError(KnowledgeBaseError, ValueError):
    """Raised when knowledge text is empty."""

    def __init__(self, message: str = "Please enter knowledge."):
        super().__init__(message)


class PersistenceError(KnowledgeBaseError):
    """Raised when a knowledge file cannot be read or written."""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        super().__init__(message)
        self.path = Path(path) if path is not None else None
