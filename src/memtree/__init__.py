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

"""Validated in-memory directory and file trees."""

from __future__ import annotations

from .config import TreeConfig, load_config
from .errors import (
    ConfigError,
    InvalidNameError,
    InvalidPathError,
    MemtreeError,
    MissingDirectoryError,
    TargetIsFileError,
)
from .logging import configure_logging, get_logger
from .tree import (
    Directory,
    File,
    FileTree,
    Node,
    Root,
    create_directory,
    create_file,
    find,
    is_valid_name,
    is_valid_path,
    new_tree,
    render,
    validate_name,
    validate_path,
    walk,
)

__all__ = [
    "ConfigError",
    "Directory",
    "File",
    "FileTree",
    "InvalidNameError",
    "InvalidPathError",
    "MemtreeError",
    "MissingDirectoryError",
    "Node",
    "Root",
    "TargetIsFileError",
    "TreeConfig",
    "configure_logging",
    "create_directory",
    "create_file",
    "find",
    "get_logger",
    "is_valid_name",
    "is_valid_path",
    "load_config",
    "new_tree",
    "render",
    "validate_name",
    "validate_path",
    "walk",
]
