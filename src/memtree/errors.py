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

"""Base exception hierarchy for :mod:`memtree`."""

from __future__ import annotations


class MemtreeError(Exception):
    """Base class for all memtree exceptions.

    Callers can catch every library-specific failure with a single handler
    while standard Python exceptions keep propagating normally.

    Example:
        Catch any tree error::

            try:
                create_file(root, "docs/readme.md", b"hello")
            except MemtreeError as e:
                logger.error("Tree operation failed: %s", e)

    Note:
        Subclasses also inherit from a standard exception type (``ValueError``,
        ``FileNotFoundError``, ...) so generic handlers keep working.
    """


class InvalidNameError(MemtreeError, ValueError):
    """Raised when a name fails the character or length grammar.

    Names are limited to alphanumeric characters, ``-``, ``.`` and ``/`` and
    must be between one and ``max_name_length`` characters long.
    """

    def __init__(self, name: str) -> None:
        super().__init__(f"Invalid name: {name!r}")
        self.name = name


class InvalidPathError(MemtreeError, ValueError):
    """Raised when a path fails the separator/dot placement grammar.

    Common causes:
        - Leading ``/`` or empty segments (``a//b``, ``a/``)
        - Leading, trailing or doubled dots, or a dot next to a separator
        - Paths longer than ``max_path_length`` bytes
        - Non-ASCII bytes
    """

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Invalid path {path!r}: {reason}")
        self.path = path
        self.reason = reason


class TargetIsFileError(MemtreeError, NotADirectoryError):
    """Raised when an operation would place a node under (or over) a file.

    Files are always leaves. Validation has already passed when this error is
    raised; it reflects the current shape of the tree, not the path syntax.
    """

    def __init__(self, path: str, *, operation: str) -> None:
        super().__init__(f"Cannot create {operation} inside a file: {path!r}")
        self.path = path
        self.operation = operation


class MissingDirectoryError(MemtreeError, FileNotFoundError):
    """Raised when file creation references a directory that does not exist.

    File creation never creates intermediate directories; call
    ``create_directory`` for the parent first.
    """

    def __init__(self, segment: str) -> None:
        super().__init__(f"Directory {segment!r} doesn't exist")
        self.segment = segment


class ConfigError(MemtreeError, ValueError):
    """Raised when the memtree configuration is invalid."""


__all__ = [
    "ConfigError",
    "InvalidNameError",
    "InvalidPathError",
    "MemtreeError",
    "MissingDirectoryError",
    "TargetIsFileError",
]
