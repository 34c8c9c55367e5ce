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

"""Tests for tree configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from memtree.config import (
    DEFAULT_CONFIG,
    ENV_MAX_NAME_LENGTH,
    ENV_MAX_PATH_LENGTH,
    TreeConfig,
    load_config,
)
from memtree.errors import ConfigError


def test_defaults() -> None:
    assert DEFAULT_CONFIG == TreeConfig(max_name_length=42, max_path_length=256)


def test_mapping_input_skips_file_io() -> None:
    config = load_config({"max_name_length": 10}, env={})

    assert config == TreeConfig(max_name_length=10, max_path_length=256)


def test_section_table_is_supported() -> None:
    config = load_config({"memtree": {"max_path_length": 64}}, env={})

    assert config.max_path_length == 64


def test_toml_file(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text("[memtree]\nmax_name_length = 80\n", encoding="utf-8")

    assert load_config(path, env={}).max_name_length == 80


def test_yaml_file(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("max_path_length: 128\n", encoding="utf-8")

    assert load_config(path, env={}).max_path_length == 128


def test_empty_yaml_file_uses_defaults(tmp_path: Path) -> None:
    path = tmp_path / "config.yml"
    path.write_text("", encoding="utf-8")

    assert load_config(path, env={}) == DEFAULT_CONFIG


def test_environment_overrides_file_values() -> None:
    config = load_config(
        {"max_name_length": 10},
        env={ENV_MAX_NAME_LENGTH: "20", ENV_MAX_PATH_LENGTH: "30"},
    )

    assert config == TreeConfig(max_name_length=20, max_path_length=30)


def test_missing_default_file_uses_defaults(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))

    assert load_config(None, env={}) == DEFAULT_CONFIG


def test_missing_explicit_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        _ = load_config(tmp_path / "absent.toml", env={})


def test_unsupported_suffix_raises(tmp_path: Path) -> None:
    path = tmp_path / "config.ini"
    path.write_text("", encoding="utf-8")

    with pytest.raises(ConfigError, match="Unsupported configuration format"):
        _ = load_config(path, env={})


def test_invalid_toml_raises_config_error(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text("max_name_length = = 3\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="Invalid TOML"):
        _ = load_config(path, env={})


def test_non_mapping_yaml_raises(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="mapping at the root"):
        _ = load_config(path, env={})


def test_non_integer_environment_value_raises() -> None:
    with pytest.raises(ConfigError, match=ENV_MAX_PATH_LENGTH):
        _ = load_config({}, env={ENV_MAX_PATH_LENGTH: "lots"})


@pytest.mark.parametrize("value", [0, -1, "12", 1.5, True])
def test_invalid_limits_raise(value: object) -> None:
    with pytest.raises(ConfigError, match="max_name_length"):
        _ = TreeConfig(max_name_length=value)  # type: ignore[arg-type]
