# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Tests for opt-in postcondition checks."""

from __future__ import annotations

import pytest

from memtree.dbc import dbc_active, dbc_enabled, ensure
from memtree.tree import Directory, create_directory, new_tree


def _double(value: int) -> int:
    return value * 2


def test_passing_postcondition_returns_result() -> None:
    checked = ensure(lambda value, result: result == value * 2)(_double)

    assert checked(3) == 6


def test_failing_postcondition_raises_assertion_error() -> None:
    def result_is_odd(value: int, *, result: int) -> bool:
        return result % 2 == 1

    checked = ensure(result_is_odd)(_double)

    with pytest.raises(AssertionError, match="result_is_odd"):
        _ = checked(3)


def test_detail_is_included_in_message() -> None:
    checked = ensure(lambda value, result: (False, "never holds"))(_double)

    with pytest.raises(AssertionError, match="Details: never holds"):
        _ = checked(1)


def test_checks_are_skipped_when_disabled() -> None:
    checked = ensure(lambda value, result: False)(_double)

    with dbc_enabled(active=False):
        assert checked(2) == 4


def test_environment_flag(monkeypatch: pytest.MonkeyPatch) -> None:
    with dbc_enabled(active=False):
        assert dbc_active() is False

    import memtree.dbc as dbc_module

    previous = dbc_module._forced_state
    dbc_module._forced_state = None
    try:
        monkeypatch.setenv("MEMTREE_DBC", "1")
        assert dbc_active() is True
        monkeypatch.setenv("MEMTREE_DBC", "off")
        assert dbc_active() is False
    finally:
        dbc_module._forced_state = previous


def test_ensure_requires_predicates() -> None:
    with pytest.raises(ValueError, match="at least one predicate"):
        _ = ensure()


def test_insertion_detects_corrupted_tree() -> None:
    root = new_tree()
    root.children.extend([Directory("dup"), Directory("dup")])

    with pytest.raises(AssertionError, match="duplicate subdirectories"):
        _ = create_directory(root, "other")
