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

"""Plain-text rendering of a tree."""

from __future__ import annotations

from typing import Final

from ._query import walk
from ._types import Container, Root

INDENT: Final[str] = "| "


def render_lines(root: Root, *, indent: str = INDENT) -> list[str]:
    """Return one line per node, depth-first in insertion order.

    Directories carry a trailing ``/``; each nesting level adds ``indent``.
    """
    lines: list[str] = []
    for depth, node in walk(root):
        suffix = "/" if isinstance(node, Container) else ""
        lines.append(f"{indent * depth}{node.name}{suffix}")
    return lines


def render(root: Root, *, indent: str = INDENT) -> str:
    """Render the tree as newline-separated text; empty trees render as ``""``."""
    return "\n".join(render_lines(root, indent=indent))


__all__ = ["INDENT", "render", "render_lines"]
