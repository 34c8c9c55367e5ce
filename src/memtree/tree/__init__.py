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

"""In-memory file tree: node types, validation, insertion and rendering.

Example usage::

    from memtree.tree import create_directory, create_file, new_tree, render

    root = new_tree()
    create_directory(root, "a/b")
    create_file(root, "a/f.txt", b"contents")
    print(render(root))
"""

from __future__ import annotations

from ._insert import create_directory, create_file
from ._query import find, walk
from ._render import INDENT, render, render_lines
from ._tree import FileTree
from ._types import (
    ROOT_NAME,
    Container,
    Directory,
    File,
    Node,
    NodeKind,
    Root,
    new_tree,
)
from ._validation import (
    SEPARATOR,
    is_valid_name,
    is_valid_path,
    split_path,
    validate_name,
    validate_path,
)

__all__ = [
    "INDENT",
    "ROOT_NAME",
    "SEPARATOR",
    "Container",
    "Directory",
    "File",
    "FileTree",
    "Node",
    "NodeKind",
    "Root",
    "create_directory",
    "create_file",
    "find",
    "is_valid_name",
    "is_valid_path",
    "new_tree",
    "render",
    "render_lines",
    "split_path",
    "validate_name",
    "validate_path",
    "walk",
]
