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

"""Read-only traversal helpers."""

from __future__ import annotations

from collections.abc import Iterator

from ._types import Container, Node, Root
from ._validation import split_path


def walk(root: Root) -> Iterator[tuple[int, Node]]:
    """Yield ``(depth, node)`` pairs depth-first in insertion order.

    The root itself is not yielded; its children have depth ``0``.
    """
    stack: list[tuple[int, Node]] = [(0, child) for child in reversed(root.children)]
    while stack:
        depth, node = stack.pop()
        yield depth, node
        if isinstance(node, Container):
            stack.extend((depth + 1, child) for child in reversed(node.children))


def find(root: Root, path: str) -> Node | None:
    """Return the node at ``path`` or ``None`` when nothing lives there.

    No validation is applied; paths that cannot exist simply return ``None``.
    """
    if not path:
        return None
    node: Node = root
    for segment in split_path(path):
        if not isinstance(node, Container):
            return None
        child = node.lookup(segment)
        if child is None:
            return None
        node = child
    return node


__all__ = ["find", "walk"]
