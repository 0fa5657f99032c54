"""
Controller layer for the Knowledge Manager GUI.
Handles business logic, no Tkinter dependencies.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path
from typing import Iterable, List, Optional, Union
from knowledge_base.core.errors import EmptyInputError, PersistenceError
from knowledge_base.core.persistence import KnowledgeFile, load_or_empty
from knowledge_base.core.store import KnowledgeStore, require_text
from knowledge_base.core.undo import UndoLog
from knowledge_base.config.manager import ConfigManager
from knowledge_base.events import EventDispatcher

log = logging.getLogger(__name__)

PathLike = Union[str, Path]


class AppState(Enum):
    """Lifecycle of the application window."""
    RUNNING = auto()
    CONFIRMING_EXIT = auto()
    TERMINATED = auto()


class ExitChoice(Enum):
    """Answer to the save prompt shown on close."""
    SAVE = auto()
    DISCARD = auto()
    CANCEL = auto()


@dataclass
class ActionResult:
    """Result of a user action."""
    success: bool
    message: str
    error: Optional[str] = None
    paths: List[Path] = field(default_factory=list)


@dataclass
class KnowledgeSession:
    """The state one window works on: its store and its undo log."""
    store: KnowledgeStore = field(default_factory=KnowledgeStore)
    undo_log: UndoLog = field(default_factory=UndoLog)
    state: AppState = AppState.RUNNING


class KnowledgeController:
    """
    Controller for the knowledge manager.
    Bridges the view and the core components without any GUI dependencies.
    Uses event system for communication.
    """

    def __init__(
        self,
        event_dispatcher: EventDispatcher = None,
        session: KnowledgeSession = None,
        backup_path: Optional[PathLike] = None
    ):
        self.event_dispatcher = event_dispatcher or EventDispatcher()
        self.session = session or KnowledgeSession()
        self.backup_path = Path(backup_path) if backup_path else ConfigManager.get_backup_path()

    @property
    def store(self) -> KnowledgeStore:
        return self.session.store

    @property
    def state(self) -> AppState:
        return self.session.state

    def tags(self) -> List[str]:
        """Current tags in display order."""
        return self.store.tags()

    def get_knowledge(self, tag: Optional[str]) -> Optional[str]:
        """Text for the selected tag, or None if nothing matches."""
        if tag is None:
            return None
        return self.store.get(tag)

    def _tags_changed(self) -> None:
        self.event_dispatcher.dispatch_tags_changed(self.tags())

    def _fail(self, message: str, error: str) -> ActionResult:
        self.event_dispatcher.dispatch_error(message)
        return ActionResult(success=False, message=message, error=error)

    def add_knowledge(self, text: str, tags: Iterable[str]) -> ActionResult:
        """
        File one snippet under every given tag.

        Args:
            text: Knowledge text from the editor
            tags: Tags chosen in the tag dialog; trimmed, blanks ignored

        Returns:
            ActionResult; failure leaves the store unchanged
        """
        try:
            require_text(text)
        except EmptyInputError as e:
            return self._fail(str(e), "Empty input")

        clean_tags = [tag.strip() for tag in tags if tag and tag.strip()]
        if not clean_tags:
            return self._fail("No tags selected.", "No tags")

        for tag in clean_tags:
            self.store.put(tag, text)

        log.debug("Added knowledge under %s", clean_tags)
        self._tags_changed()
        self.event_dispatcher.dispatch_status(
            f"Added knowledge to {len(clean_tags)} tag(s)"
        )
        return ActionResult(success=True, message=f"Added to {', '.join(sorted(clean_tags))}")

    def delete_tag(self, tag: Optional[str]) -> ActionResult:
        """Delete a tag and remember it for undo; unknown tags are a no-op."""
        if tag is None or self.store.remove(tag) is None:
            return ActionResult(success=False, message="Nothing to delete")

        self.session.undo_log.push_deletion(tag)
        log.debug("Deleted tag %r", tag)
        self._tags_changed()
        self.event_dispatcher.dispatch_status(f"Deleted '{tag}'")
        return ActionResult(success=True, message=f"Deleted '{tag}'")

    def undo_delete(self, current_text: str) -> ActionResult:
        """
        Restore the most recently deleted tag.

        The deleted text is not kept, so the restored tag takes whatever
        text is in the editor right now.

        Args:
            current_text: Text currently shown in the editor
        """
        tag = self.session.undo_log.pop_deletion()
        if tag is None:
            return ActionResult(success=False, message="Nothing to undo")

        self.store.put(tag, current_text)
        log.debug("Restored tag %r", tag)
        self._tags_changed()
        self.event_dispatcher.dispatch_status(f"Restored '{tag}'")
        return ActionResult(success=True, message=f"Restored '{tag}'")

    def load_knowledge(self, path: Optional[PathLike] = None) -> ActionResult:
        """
        Replace the session with knowledge loaded from disk.

        Args:
            path: File chosen by the user; None loads the backup file

        A missing file starts an empty store and is not an error.

        Returns:
            ActionResult; on failure the session starts with an empty store
        """
        source = Path(path) if path else self.backup_path
        existed = KnowledgeFile(source).exists()

        try:
            store = load_or_empty(source)
        except PersistenceError as e:
            log.error("Load failed: %s", e)
            self._replace_store(KnowledgeStore())
            return self._fail(f"Could not load knowledge: {e}", str(e))

        self._replace_store(store)
        if path and existed:
            ConfigManager.save(last_file=str(source.resolve()))

        self.event_dispatcher.dispatch_knowledge_loaded(source)
        self.event_dispatcher.dispatch_status(f"Loaded {len(store)} tag(s)")
        return ActionResult(
            success=True,
            message=f"Loaded {len(store)} tag(s) from {source}",
            paths=[source]
        )

    def last_file(self) -> Optional[Path]:
        """The last knowledge file loaded, if it still exists."""
        last = ConfigManager.get_last_file()
        if not last or not Path(last).is_file():
            return None
        return Path(last)

    def _replace_store(self, store: KnowledgeStore) -> None:
        self.session.store = store
        self.session.undo_log.clear()
        self._tags_changed()

    def save_knowledge(self, path: Optional[PathLike] = None) -> ActionResult:
        """
        Save to the chosen file and always to the backup file.

        Args:
            path: File chosen by the user; None writes only the backup

        Returns:
            ActionResult; failure means the chosen file was not written
        """
        saved: List[Path] = []

        if path:
            try:
                saved.append(KnowledgeFile(path).save(self.store))
            except PersistenceError as e:
                log.error("Save failed: %s", e)
                return self._fail(f"Could not save knowledge: {e}", str(e))

        same_file = path and Path(path).resolve() == self.backup_path.resolve()
        backup_error = None
        if not same_file:
            try:
                saved.append(KnowledgeFile(self.backup_path).save(self.store))
                log.info("Backup saved at: %s", self.backup_path.resolve())
            except PersistenceError as e:
                log.error("Backup failed: %s", e)
                backup_error = str(e)
                self.event_dispatcher.dispatch_error(f"Backup failed: {e}")

        if not saved:
            return ActionResult(
                success=False,
                message=f"Could not save knowledge: {backup_error}",
                error=backup_error
            )

        self.event_dispatcher.dispatch_knowledge_saved(saved)
        return ActionResult(
            success=True,
            message=f"Saved to {', '.join(str(p) for p in saved)}",
            error=backup_error,
            paths=saved
        )

    def request_exit(self) -> AppState:
        """Close requested: ask the user what to do with unsaved knowledge."""
        if self.session.state is AppState.RUNNING:
            self._set_state(AppState.CONFIRMING_EXIT)
        return self.session.state

    def exit_and_maybe_save(
        self,
        choice: ExitChoice,
        path: Optional[PathLike] = None
    ) -> AppState:
        """
        Resolve the exit prompt.

        Args:
            choice: SAVE, DISCARD or CANCEL
            path: File chosen for SAVE; None if the file chooser was cancelled

        Returns:
            The new state; TERMINATED means the window may close
        """
        if self.session.state is not AppState.CONFIRMING_EXIT:
            self.request_exit()

        if choice is ExitChoice.CANCEL:
            return self._set_state(AppState.RUNNING)

        if choice is ExitChoice.SAVE:
            if not path:
                return self._set_state(AppState.RUNNING)
            result = self.save_knowledge(path)
            if not result.success:
                return self._set_state(AppState.RUNNING)

        return self._set_state(AppState.TERMINATED)

    def _set_state(self, state: AppState) -> AppState:
        self.session.state = state
        self.event_dispatcher.dispatch_exit_state(state)
        return state
