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

"""Name and path grammar checks.

Names:
    One to ``max_length`` characters drawn from alphanumerics, ``-``, ``.``
    and ``/``. Insertion validates the whole path string as a name, which is
    why ``/`` is part of the alphabet.

Paths:
    ASCII only, at most ``max_length`` bytes, no leading ``/``, no empty
    segments (``a//b`` or a trailing ``/``), and no ``.`` at the start, at the
    end, next to another ``.`` or next to a ``/``.
"""

from __future__ import annotations

from typing import Final

from ..config import MAX_NAME_LENGTH, MAX_PATH_LENGTH
from ..errors import InvalidNameError, InvalidPathError

SEPARATOR: Final[str] = "/"
_DOT: Final[int] = ord(".")
_SLASH: Final[int] = ord(SEPARATOR)
_NAME_PUNCTUATION: Final[frozenset[str]] = frozenset("-./")


def is_valid_name(name: str, *, max_length: int = MAX_NAME_LENGTH) -> bool:
    """Return ``True`` when ``name`` satisfies the name grammar."""
    if not 1 <= len(name) <= max_length:
        return False
    return all(char.isalnum() or char in _NAME_PUNCTUATION for char in name)


def validate_name(name: str, *, max_length: int = MAX_NAME_LENGTH) -> None:
    """Raise :class:`InvalidNameError` unless ``name`` is valid."""
    if not is_valid_name(name, max_length=max_length):
        raise InvalidNameError(name)


def validate_path(path: str, *, max_length: int = MAX_PATH_LENGTH) -> None:
    """Validate separator and dot placement across ``path``.

    The check is purely syntactic; it does not consult any tree.

    Raises:
        InvalidPathError: With ``reason`` describing the first violation found.
    """
    try:
        data = path.encode("ascii")
    except UnicodeEncodeError:
        raise InvalidPathError(path, "path must be ASCII") from None

    if not data:
        raise InvalidPathError(path, "path is empty")
    if len(data) > max_length:
        raise InvalidPathError(path, f"path exceeds {max_length} bytes")

    last = len(data) - 1
    for index, byte in enumerate(data):
        if byte == _SLASH:
            if index == 0:
                raise InvalidPathError(path, "leading separator")
            after = data[index + 1] if index < last else _SLASH
            if data[index - 1] == _SLASH or after == _SLASH:
                raise InvalidPathError(path, f"empty segment at byte {index}")
        elif byte == _DOT:
            if index == 0:
                raise InvalidPathError(path, "leading dot")
            if index == last:
                raise InvalidPathError(path, "trailing dot")
            neighbours = (data[index - 1], data[index + 1])
            if _DOT in neighbours or _SLASH in neighbours:
                raise InvalidPathError(path, f"misplaced dot at byte {index}")


def is_valid_path(path: str, *, max_length: int = MAX_PATH_LENGTH) -> bool:
    """Return ``True`` when :func:`validate_path` accepts ``path``."""
    try:
        validate_path(path, max_length=max_length)
    except InvalidPathError:
        return False
    return True


def split_path(path: str) -> list[str]:
    return path.split(SEPARATOR)


__all__ = [
    "SEPARATOR",
    "is_valid_name",
    "is_valid_path",
    "split_path",
    "validate_name",
    "validate_path",
]
