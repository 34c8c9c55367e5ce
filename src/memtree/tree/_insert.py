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

"""Directory and file insertion.

Both operations validate the full path (name grammar, then path grammar)
before touching the tree, then descend from the root one segment at a time.

``create_directory`` has ``mkdir -p`` semantics: existing directories are
reused and missing ones are appended. Only directories are merged into; a
file sharing the final name does not block the new directory. The existing
prefix is resolved before anything is appended, so a call that fails on a
file in the way leaves the tree untouched.

``create_file`` never creates directories. Every segment but the last must
name an existing directory; the last names the new file, which is appended
to its parent's children.
"""

from __future__ import annotations

from collections.abc import Buffer, Sequence
from typing import Literal, cast

from ..config import DEFAULT_CONFIG, TreeConfig
from ..dbc import ensure
from ..errors import MissingDirectoryError, TargetIsFileError
from ._query import find, walk
from ._types import Container, Directory, File, Root
from ._validation import is_valid_name, split_path, validate_name, validate_path


def _tree_is_well_formed(root: Root, *_: object, **__: object) -> tuple[bool, str]:
    containers: list[Container] = [root]
    for _depth, node in walk(root):
        if "/" in node.name or not is_valid_name(node.name, max_length=len(node.name)):
            return False, f"node name {node.name!r} is not a valid segment"
        if isinstance(node, Container):
            containers.append(node)
    for container in containers:
        names = [c.name for c in container.children if isinstance(c, Directory)]
        if len(names) != len(set(names)):
            return False, f"{container.name!r} has duplicate subdirectories"
    return True, ""


def _directory_is_reachable(
    root: Root, path: str, *_: object, result: Directory, **__: object
) -> bool:
    return find(root, path) is result


def _file_is_last_child(
    root: Root, path: str, *_: object, result: File, **__: object
) -> bool:
    parent_path, _sep, _name = path.rpartition("/")
    parent = find(root, parent_path) if parent_path else root
    return isinstance(parent, Container) and parent.children[-1] is result


def _validate(path: str, config: TreeConfig) -> list[str]:
    validate_name(path, max_length=config.max_name_length)
    validate_path(path, max_length=config.max_path_length)
    return split_path(path)


def _descend(
    root: Root,
    segments: Sequence[str],
    *,
    path: str,
    operation: Literal["directory", "file"],
    stop: int | None = None,
) -> tuple[Container, int]:
    """Follow existing containers along ``segments[:stop]``.

    Returns the deepest container reached and how many segments it consumed.
    Raises :class:`TargetIsFileError` when a file would have to be descended
    through, that is when a file holds the name and more segments follow it.
    A file holding the last segment is not in the way.
    """
    current: Container = root
    end = len(segments) if stop is None else stop
    for consumed, segment in enumerate(segments[:end]):
        child = current.lookup(segment)
        if isinstance(child, Container):
            current = child
            continue
        if child is not None and consumed + 1 < len(segments):
            raise TargetIsFileError(path, operation=operation)
        return current, consumed
    return current, end


@ensure(_tree_is_well_formed, _directory_is_reachable)
def create_directory(
    root: Root, path: str, *, config: TreeConfig | None = None
) -> Directory:
    """Create the directory at ``path`` along with any missing parents.

    Calling it again for an existing directory is a no-op that returns the
    existing node.

    Raises:
        InvalidNameError: ``path`` fails the name grammar.
        InvalidPathError: ``path`` fails the path grammar.
        TargetIsFileError: an existing file holds a segment that more
            segments follow. A file holding only the last name is left alone
            and the new directory is appended beside it.
    """
    segments = _validate(path, config or DEFAULT_CONFIG)
    current, consumed = _descend(root, segments, path=path, operation="directory")
    for segment in segments[consumed:]:
        directory = Directory(segment)
        current.children.append(directory)
        current = directory
    return cast(Directory, current)


@ensure(_tree_is_well_formed, _file_is_last_child)
def create_file(
    root: Root,
    path: str,
    contents: Buffer = b"",
    *,
    config: TreeConfig | None = None,
) -> File:
    """Append a file named by the last segment of ``path``.

    Raises:
        InvalidNameError: ``path`` fails the name grammar.
        InvalidPathError: ``path`` fails the path grammar.
        TargetIsFileError: a parent segment names an existing file.
        MissingDirectoryError: a parent directory does not exist.
    """
    segments = _validate(path, config or DEFAULT_CONFIG)
    name = segments[-1]
    parent, consumed = _descend(
        root, segments, path=path, operation="file", stop=len(segments) - 1
    )
    if consumed < len(segments) - 1:
        raise MissingDirectoryError(segments[consumed])
    node = File(name, bytes(contents))
    parent.children.append(node)
    return node


__all__ = ["create_directory", "create_file"]
