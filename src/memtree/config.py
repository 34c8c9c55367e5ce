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

"""Configuration for tree limits."""

from __future__ import annotations

import os
import tomllib
from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass
from pathlib import Path
from typing import Final, cast

import yaml

from .errors import ConfigError

DEFAULT_CONFIG_PATH = Path("~/.config/memtree/config.toml")

MAX_NAME_LENGTH: Final[int] = 42
MAX_PATH_LENGTH: Final[int] = 256

ENV_MAX_NAME_LENGTH = "MEMTREE_MAX_NAME_LENGTH"
ENV_MAX_PATH_LENGTH = "MEMTREE_MAX_PATH_LENGTH"

_SECTION = "memtree"

__all__ = [
    "DEFAULT_CONFIG",
    "DEFAULT_CONFIG_PATH",
    "MAX_NAME_LENGTH",
    "MAX_PATH_LENGTH",
    "TreeConfig",
    "load_config",
]


@dataclass(frozen=True, slots=True)
class TreeConfig:
    """Length limits applied by the name and path validators."""

    max_name_length: int = MAX_NAME_LENGTH
    max_path_length: int = MAX_PATH_LENGTH

    def __post_init__(self) -> None:
        for field_name in ("max_name_length", "max_path_length"):
            value = getattr(self, field_name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                msg = f"{field_name} must be a positive integer (got {value!r})."
                raise ConfigError(msg)


DEFAULT_CONFIG: Final[TreeConfig] = TreeConfig()


def load_config(
    path: Path | Mapping[str, object] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> TreeConfig:
    """Load tree limits from a file, a mapping, and the environment.

    Parameters
    ----------
    path:
        TOML or YAML file. ``None`` falls back to
        ``~/.config/memtree/config.toml`` and to the defaults when that file
        is absent. Tests may pass an in-memory mapping to skip file I/O.
    env:
        Optional environment mapping. Defaults to :data:`os.environ`.
        ``MEMTREE_MAX_NAME_LENGTH`` and ``MEMTREE_MAX_PATH_LENGTH`` override
        file values.
    """

    env_map = os.environ if env is None else env

    if isinstance(path, Mapping):
        raw: Mapping[str, object] = path
    else:
        config_path = path if path is not None else DEFAULT_CONFIG_PATH.expanduser()
        raw = _load_config_file(config_path, required=path is not None)

    section = raw.get(_SECTION)
    settings: dict[str, object] = {}
    if isinstance(section, Mapping):
        settings.update(cast(Mapping[str, object], section))
    else:
        settings.update(raw)

    values: dict[str, object] = {
        "max_name_length": settings.get("max_name_length", MAX_NAME_LENGTH),
        "max_path_length": settings.get("max_path_length", MAX_PATH_LENGTH),
    }
    if ENV_MAX_NAME_LENGTH in env_map:
        values["max_name_length"] = _parse_int(
            ENV_MAX_NAME_LENGTH, env_map[ENV_MAX_NAME_LENGTH]
        )
    if ENV_MAX_PATH_LENGTH in env_map:
        values["max_path_length"] = _parse_int(
            ENV_MAX_PATH_LENGTH, env_map[ENV_MAX_PATH_LENGTH]
        )

    return TreeConfig(
        max_name_length=cast(int, values["max_name_length"]),
        max_path_length=cast(int, values["max_path_length"]),
    )


def _load_config_file(path: Path, *, required: bool) -> dict[str, object]:
    if not path.exists():
        if not required:
            return {}
        msg = f"Configuration file not found: {path}"
        raise FileNotFoundError(msg)

    suffix = path.suffix.lower()
    data: object
    if suffix == ".toml" or not suffix:
        with path.open("rb") as handle:
            try:
                data = tomllib.load(handle)
            except tomllib.TOMLDecodeError as error:
                raise ConfigError(f"Invalid TOML in {path}: {error}") from error
    elif suffix in {".yaml", ".yml"}:
        with path.open("r", encoding="utf-8") as handle:
            try:
                data = yaml.safe_load(handle) or {}
            except yaml.YAMLError as error:
                raise ConfigError(f"Invalid YAML in {path}: {error}") from error
    else:
        msg = f"Unsupported configuration format: {path.suffix}"
        raise ConfigError(msg)

    if not isinstance(data, MutableMapping):
        msg = "Configuration file must contain a mapping at the root."
        raise ConfigError(msg)

    typed: dict[str, object] = {}
    for key, value in cast(MutableMapping[object, object], data).items():
        if not isinstance(key, str):
            msg = f"Configuration keys must be strings (got {key!r})."
            raise ConfigError(msg)
        typed[key] = value
    return typed


def _parse_int(name: str, value: str) -> int:
    try:
        return int(value)
    except ValueError:
        msg = f"{name} must be an integer (got {value!r})."
        raise ConfigError(msg) from None
