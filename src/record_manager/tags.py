"""Tag (record set metadata) conversion."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from record_manager.models import AaaaRecordState

MAX_TAGS = 50
MAX_KEY_LENGTH = 512
MAX_VALUE_LENGTH = 256


def validate_tags(tags: dict) -> list[str]:
    """Return a list of problems with ``tags``; empty when valid."""
    problems: list[str] = []
    if len(tags) > MAX_TAGS:
        problems.append(f"a maximum of {MAX_TAGS} tags can be applied, got {len(tags)}")
    for key, value in tags.items():
        if len(str(key)) > MAX_KEY_LENGTH:
            problems.append(f"the maximum length for a tag key is {MAX_KEY_LENGTH} characters: {key!r}")
        if len(str(value)) > MAX_VALUE_LENGTH:
            problems.append(f"the maximum length for a tag value is {MAX_VALUE_LENGTH} characters: {key!r}")
    return problems


def expand_tags(tags: dict | None) -> dict[str, str]:
    """Convert local tags to the string map Azure stores as record set metadata."""
    return {str(k): str(v) for k, v in (tags or {}).items()}


def flatten_tags(metadata: dict[str, str] | None) -> dict[str, str]:
    return dict(metadata or {})


def flatten_and_set(state: AaaaRecordState, metadata: dict[str, str] | None) -> None:
    """Overwrite ``state.tags`` with the metadata returned by Azure."""
    state.tags = flatten_tags(metadata)
