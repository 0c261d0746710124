from __future__ import annotations

import dataclasses

import pytest

from spireconf.domain.model import Entry, Selector
from tests.support.entries import SUBJECT, make_entry


def test_new_entry_is_not_persisted() -> None:
    entry = make_entry("unix:uid:501")

    assert entry.id == ""
    assert entry.is_persisted is False
    assert make_entry("unix:uid:501", entry_id="entry-1").is_persisted is True


def test_same_selectors_ignores_order() -> None:
    left = make_entry("unix:uid:501", "unix:gid:20")
    right = make_entry("unix:gid:20", "unix:uid:501")

    assert left.same_selectors(right)
    assert left.selector_set == frozenset({Selector("unix", "uid:501"), Selector("unix", "gid:20")})


def test_entry_without_parent_defaults() -> None:
    entry = Entry(subject_identity=SUBJECT)

    assert entry.parent_identity is None
    assert entry.selectors == ()


def test_entry_is_immutable() -> None:
    entry = make_entry("unix:uid:501")

    with pytest.raises(dataclasses.FrozenInstanceError):
        entry.id = "changed"  # type: ignore[misc]
