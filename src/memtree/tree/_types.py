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

"""Node types for the in-memory tree.

A tree is a :class:`Root` owning an ordered list of children. Children are
:class:`Directory` nodes (which own children of their own) or :class:`File`
leaves. ``Root`` and ``Directory`` share the :class:`Container` base so that
lookup and descent are written once for both.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final, Literal

ROOT_NAME: Final[str] = "$$root"

NodeKind = Literal["root", "directory", "file"]


@dataclass(slots=True)
class Container:
    """Node owning an ordered sequence of children."""

    name: str
    children: list[Node] = field(default_factory=list)

    @property
    def kind(self) -> NodeKind:
        return "directory"

    def lookup(self, name: str) -> Node | None:
        """Return the child called ``name``.

        Containers win over files when both carry the name; otherwise the
        first match in insertion order is returned.
        """
        fallback: Node | None = None
        for child in self.children:
            if child.name != name:
                continue
            if isinstance(child, Container):
                return child
            if fallback is None:
                fallback = child
        return fallback


@dataclass(slots=True)
class Directory(Container):
    """Named directory inside the tree."""


@dataclass(slots=True)
class Root(Container):
    """Entry point of a tree. Never matched by name during lookup."""

    name: str = ROOT_NAME

    @property
    def kind(self) -> NodeKind:
        return "root"


@dataclass(slots=True, frozen=True)
class File:
    """Leaf node carrying an immutable byte buffer."""

    name: str
    contents: bytes = b""

    def __post_init__(self) -> None:
        if not isinstance(self.contents, bytes):
            object.__setattr__(self, "contents", bytes(self.contents))

    @property
    def kind(self) -> NodeKind:
        return "file"

    @property
    def size(self) -> int:
        return len(self.contents)


type Node = Root | Directory | File


def new_tree() -> Root:
    """Return an empty tree."""
    return Root()


__all__ = [
    "ROOT_NAME",
    "Container",
    "Directory",
    "File",
    "Node",
    "NodeKind",
    "Root",
    "new_tree",
]
