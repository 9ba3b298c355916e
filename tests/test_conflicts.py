from dataclasses import replace

import pytest

from prose_metrics.conflicts import (
    MANUAL_RESOLUTION,
    apply_resolution,
    resolve_conflict,
    resolve_conflicts,
)
from prose_metrics.models import CollaborationConflict


def _conflict(conflict_type: str, a: str = "foo", b: str = "bar", **kwargs):
    data = {
        "conflict_id": "c-1",
        "conflict_type": conflict_type,
        "start_pos": 0,
        "end_pos": 3,
        "user_a_change": a,
        "user_b_change": b,
        "timestamp": "2024-01-01T00:00:00Z",
        "resolution_suggestion": "",
    }
    data.update(kwargs)
    return CollaborationConflict(**data)


def test_insertion_keeps_both_changes():
    resolved = resolve_conflict(_conflict("text_insertion", "foo", "bar"))
    assert resolved.resolution_suggestion == "foo bar"


@pytest.mark.parametrize(
    ("a", "b", "expected"),
    [("ab", "abcdef", "ab"), ("abcdef", "ab", "ab"), ("xy", "zw", "xy")],
)
def test_deletion_keeps_shorter_change(a: str, b: str, expected: str):
    """The shorter deletion wins and ties favor user A."""
    resolved = resolve_conflict(_conflict("text_deletion", a, b))
    assert resolved.resolution_suggestion == expected


def test_deletion_compares_characters_not_bytes():
    resolved = resolve_conflict(_conflict("text_deletion", "\u00e9\u00e9\u00e9", "abcd"))
    assert resolved.resolution_suggestion == "\u00e9\u00e9\u00e9"


def test_modification_takes_user_b_regardless_of_timestamp():
    conflict = _conflict("text_modification", "old", "new", timestamp="1999-01-01")
    assert resolve_conflict(conflict).resolution_suggestion == "new"


def test_unknown_type_requires_manual_resolution():
    resolved = resolve_conflict(_conflict("unknown_type"))
    assert resolved.resolution_suggestion == MANUAL_RESOLUTION
    assert MANUAL_RESOLUTION == "Manual resolution required"


def test_resolve_conflicts_preserves_order_and_other_fields():
    conflicts = [
        _conflict("text_insertion", conflict_id="first", resolution_suggestion="stale"),
        _conflict("text_deletion", conflict_id="second"),
        _conflict("something_else", conflict_id="third"),
    ]
    resolved = resolve_conflicts(conflicts)

    assert [c.conflict_id for c in resolved] == ["first", "second", "third"]
    for before, after in zip(conflicts, resolved):
        assert replace(after, resolution_suggestion=before.resolution_suggestion) == before
    assert conflicts[0].resolution_suggestion == "stale"


def test_resolve_conflicts_empty_list():
    assert resolve_conflicts([]) == []


def test_apply_resolution_splices_span():
    conflict = resolve_conflict(
        _conflict("text_modification", "world", "there", start_pos=6, end_pos=11)
    )
    assert apply_resolution("Hello world", conflict) == "Hello there"


def test_apply_resolution_leaves_manual_conflicts_alone():
    conflict = resolve_conflict(_conflict("unknown", start_pos=0, end_pos=5))
    assert apply_resolution("Hello world", conflict) == "Hello world"


@pytest.mark.parametrize(("start", "end"), [(4, 2), (0, 99), (-1, 2)])
def test_apply_resolution_ignores_out_of_range_spans(start: int, end: int):
    conflict = resolve_conflict(
        _conflict("text_modification", start_pos=start, end_pos=end)
    )
    assert apply_resolution("Hello", conflict) == "Hello"
