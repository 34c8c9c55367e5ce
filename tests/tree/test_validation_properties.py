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

"""Property-based tests for the name and path grammar."""

from __future__ import annotations

from hypothesis import assume, given, settings, strategies as st

from memtree.tree import create_directory, is_valid_name, is_valid_path, new_tree

_WORD = st.text(alphabet="abcdefghijklmnopqrstuvwxyz0123456789-", min_size=1, max_size=6)
_SEGMENT = st.lists(_WORD, min_size=1, max_size=3).map(".".join)
_PATH = st.lists(_SEGMENT, min_size=1, max_size=5).map("/".join)


@given(st.text())
@settings(max_examples=200)
def test_is_valid_name_is_total(name: str) -> None:
    assert is_valid_name(name) in {True, False}


@given(st.text())
@settings(max_examples=200)
def test_is_valid_path_is_total(path: str) -> None:
    assert is_valid_path(path) in {True, False}


@given(st.text(min_size=1, max_size=20), st.sampled_from("$%# _!?*"))
def test_names_with_forbidden_characters_are_rejected(prefix: str, bad: str) -> None:
    assert is_valid_name(prefix + bad) is False


@given(_PATH)
def test_well_formed_paths_are_accepted(path: str) -> None:
    assume(len(path) <= 256)
    assert is_valid_path(path) is True


@given(_PATH, _PATH)
def test_doubled_separator_is_always_rejected(left: str, right: str) -> None:
    assert is_valid_path(f"{left}//{right}") is False


@given(_PATH)
def test_leading_or_trailing_markers_are_rejected(path: str) -> None:
    assert is_valid_path(f"/{path}") is False
    assert is_valid_path(f"{path}/") is False
    assert is_valid_path(f".{path}") is False
    assert is_valid_path(f"{path}.") is False


@given(_PATH)
def test_well_formed_paths_resolve_to_created_directory(path: str) -> None:
    assume(len(path) <= 42)
    root = new_tree()
    directory = create_directory(root, path)
    assert directory.name == path.split("/")[-1]
    assert create_directory(root, path) is directory
