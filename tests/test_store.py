"""Tests for knowledge_base.core.store and knowledge_base.core.undo."""

import pytest

from knowledge_base.core.errors import EmptyInputError
from knowledge_base.core.store import KnowledgeStore, require_text
from knowledge_base.core.undo import UndoLog


class TestKnowledgeStore:
    """Tests for KnowledgeStore."""

    def test_put_and_get(self):
        store = KnowledgeStore()
        store.put("work", "finish the report")

        assert store.get("work") == "finish the report"
        assert "work" in store
        assert len(store) == 1

    def test_put_trims_tag(self):
        store = KnowledgeStore()
        store.put("  work  ", "text")

        assert store.tags() == ["work"]
        assert store.get("work") == "text"

    def test_put_rejects_blank_tag(self):
        store = KnowledgeStore()

        with pytest.raises(ValueError):
            store.put("   ", "text")
        assert len(store) == 0

    def test_tags_are_case_sensitive(self):
        store = KnowledgeStore()
        store.put("Work", "a")
        store.put("work", "b")

        assert store.tags() == ["Work", "work"]

    def test_insertion_order_kept_on_update(self):
        """Overwriting a tag does not move it."""
        store = KnowledgeStore()
        store.put("a", "1")
        store.put("b", "2")
        store.put("a", "3")

        assert store.tags() == ["a", "b"]
        assert store.get("a") == "3"

    def test_remove_returns_text(self):
        store = KnowledgeStore()
        store.put("a", "1")

        assert store.remove("a") == "1"
        assert store.get("a") is None
        assert store.tags() == []

    def test_remove_missing_returns_none(self):
        assert KnowledgeStore().remove("missing") is None

    def test_readded_tag_goes_to_end(self):
        store = KnowledgeStore()
        store.put("a", "1")
        store.put("b", "2")
        store.remove("a")
        store.put("a", "1")

        assert store.tags() == ["b", "a"]

    def test_items_and_iteration(self):
        store = KnowledgeStore()
        store.put("a", "1")
        store.put("b", "2")

        assert store.items() == [("a", "1"), ("b", "2")]
        assert list(store) == ["a", "b"]

    def test_clear(self):
        store = KnowledgeStore()
        store.put("a", "1")
        store.clear()

        assert len(store) == 0


class TestRequireText:
    """Tests for require_text."""

    def test_returns_text(self):
        assert require_text(" note ") == " note "

    @pytest.mark.parametrize("text", ["", "   ", "\n\t", None])
    def test_blank_text_raises(self, text):
        with pytest.raises(EmptyInputError, match="Please enter knowledge"):
            require_text(text)


class TestUndoLog:
    """Tests for UndoLog."""

    def test_pop_empty_returns_none(self):
        log = UndoLog()

        assert log.pop_deletion() is None
        assert not log

    def test_lifo_order(self):
        log = UndoLog()
        log.push_deletion("first")
        log.push_deletion("second")

        assert log.peek() == "second"
        assert log.pop_deletion() == "second"
        assert log.pop_deletion() == "first"
        assert log.pop_deletion() is None

    def test_no_deduplication(self):
        log = UndoLog()
        log.push_deletion("work")
        log.push_deletion("work")

        assert len(log) == 2
        assert log.pop_deletion() == "work"
        assert log.pop_deletion() == "work"

    def test_clear(self):
        log = UndoLog()
        log.push_deletion("a")
        log.clear()

        assert len(log) == 0
        assert log.peek() is None
