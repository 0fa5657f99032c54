"""
Tag Resolution
==============

Turns the choices made in the tag selection dialog into the set of tags a
snippet is filed under.
"""

from typing import Iterable, Set


def split_tag_text(new_tag_text: str) -> Set[str]:
    """Split comma-separated tag input, trimming each tag and dropping blanks."""
    if not new_tag_text:
        return set()
    return {tag.strip() for tag in new_tag_text.split(",") if tag.strip()}


def resolve_tags(
    existing_tags: Iterable[str],
    checked_tags: Iterable[str],
    new_tag_text: str = ""
) -> Set[str]:
    """
    Resolve the tags selected for a new snippet.

    Args:
        existing_tags: Tags offered as checkboxes
        checked_tags: Tags the user ticked
        new_tag_text: Free text of newly typed, comma-separated tags

    Returns:
        Ticked tags that are on offer, plus every new tag, all trimmed
    """
    offered = set(existing_tags)
    selected = {tag.strip() for tag in checked_tags if tag in offered and tag.strip()}
    return selected | split_tag_text(new_tag_text)
