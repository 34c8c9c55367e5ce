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

"""Thread-safe facade over a single tree.

Example usage::

    from memtree import FileTree

    tree = FileTree()
    tree.create_directory("docs/guides")
    tree.create_file("docs/readme.md", b"hello")
    print(tree.render())
"""

from __future__ import annotations

import threading
from collections.abc import Buffer, Callable
from dataclasses import dataclass, field

from ..config import DEFAULT_CONFIG, TreeConfig
from ..errors import MemtreeError
from ..logging import StructuredLogger, get_logger
from ._insert import create_directory, create_file
from ._query import find, walk
from ._render import render
from ._types import Directory, File, Node, Root, new_tree

_logger: StructuredLogger = get_logger(__name__, context={"component": "tree"})


@dataclass(slots=True)
class FileTree:
    """One tree guarded by one lock.

    The free functions in :mod:`memtree.tree` assume a single caller. This
    wrapper serializes every read and write so that the tree can be shared
    between threads.

    Thread-safety:
        All operations take the same lock; a reader never observes a
        half-appended directory chain.
    """

    config: TreeConfig = DEFAULT_CONFIG
    logger: StructuredLogger = field(default=_logger, repr=False)
    _root: Root = field(default_factory=new_tree, init=False, repr=False)
    _lock: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False
    )

    @property
    def root(self) -> Root:
        return self._root

    def create_directory(self, path: str) -> Directory:
        """Create ``path`` and any missing parents. See :func:`create_directory`."""
        with self._lock:
            existing = find(self._root, path)
            directory = self._run(
                "directory",
                path,
                lambda: create_directory(self._root, path, config=self.config),
            )
        if directory is existing:
            return directory
        self.logger.debug(
            "Directory created.",
            event="memtree.directory.created",
            context={"path": path},
        )
        return directory

    def create_file(self, path: str, contents: Buffer = b"") -> File:
        """Append a file under an existing directory. See :func:`create_file`."""
        with self._lock:
            node = self._run(
                "file",
                path,
                lambda: create_file(self._root, path, contents, config=self.config),
            )
        self.logger.debug(
            "File created.",
            event="memtree.file.created",
            context={"path": path, "size": node.size},
        )
        return node

    def find(self, path: str) -> Node | None:
        with self._lock:
            return find(self._root, path)

    def walk(self) -> list[tuple[int, Node]]:
        """Return a depth-first ``(depth, node)`` listing taken under the lock."""
        with self._lock:
            return list(walk(self._root))

    def render(self) -> str:
        with self._lock:
            return render(self._root)

    def _run[T](self, operation: str, path: str, action: Callable[[], T]) -> T:
        try:
            return action()
        except MemtreeError as error:
            self.logger.info(
                "Tree operation rejected.",
                event=f"memtree.{operation}.rejected",
                context={
                    "path": path,
                    "error": type(error).__name__,
                    "message": str(error),
                },
            )
            raise


__all__ = ["FileTree"]
