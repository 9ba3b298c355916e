from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable, Dict, List, Sequence

from .models import CollaborationConflict

logger = logging.getLogger(__name__)

TEXT_INSERTION = "text_insertion"
TEXT_DELETION = "text_deletion"
TEXT_MODIFICATION = "text_modification"

MANUAL_RESOLUTION = "Manual resolution required"


def _merge_insertions(conflict: CollaborationConflict) -> str:
    return f"{conflict.user_a_change} {conflict.user_b_change}"


def _keep_shorter_deletion(conflict: CollaborationConflict) -> str:
    # Ties go to user A.
    if len(conflict.user_b_change) < len(conflict.user_a_change):
        return conflict.user_b_change
    return conflict.user_a_change


def _take_latest_modification(conflict: CollaborationConflict) -> str:
    # User B is treated as the most recent edit; timestamp is not consulted.
    return conflict.user_b_change


RESOLVERS: Dict[str, Callable[[CollaborationConflict], str]] = {
    TEXT_INSERTION: _merge_insertions,
    TEXT_DELETION: _keep_shorter_deletion,
    TEXT_MODIFICATION: _take_latest_modification,
}


def resolve_conflict(conflict: CollaborationConflict) -> CollaborationConflict:
    """Return a copy of the conflict with its resolution_suggestion filled in."""
    resolver = RESOLVERS.get(conflict.conflict_type)
    if resolver is None:
        logger.info(
            "Conflict %s has unsupported type %r; manual resolution required",
            conflict.conflict_id,
            conflict.conflict_type,
        )
        suggestion = MANUAL_RESOLUTION
    else:
        suggestion = resolver(conflict)
        logger.debug(
            "Resolved conflict %s (%s)", conflict.conflict_id, conflict.conflict_type
        )
    return replace(conflict, resolution_suggestion=suggestion)


def resolve_conflicts(
    conflicts: Sequence[CollaborationConflict],
) -> List[CollaborationConflict]:
    """Resolve each conflict, preserving length and order."""
    return [resolve_conflict(conflict) for conflict in conflicts]


def apply_resolution(text: str, conflict: CollaborationConflict) -> str:
    """
    Splice a resolved conflict's suggestion into text over its span.

    Text is returned unchanged when the conflict needs manual resolution or
    its span is inverted or falls outside the text.
    """
    if conflict.resolution_suggestion == MANUAL_RESOLUTION:
        return text
    start, end = conflict.start_pos, conflict.end_pos
    if start < 0 or end < start or end > len(text):
        logger.debug(
            "Conflict %s span [%d, %d) does not fit text of length %d",
            conflict.conflict_id,
            start,
            end,
            len(text),
        )
        return text
    return text[:start] + conflict.resolution_suggestion + text[end:]
