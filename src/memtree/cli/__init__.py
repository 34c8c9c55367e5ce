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

"""Command line entry points for the ``memtree`` executable."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any, Final, Literal, TextIO

from ..config import load_config
from ..errors import MemtreeError
from ..logging import configure_logging, get_logger
from ..tree import FileTree

type Operation = tuple[Literal["directory", "file"], str]

DEMO_DIRECTORIES: Final[tuple[str, ...]] = (
    "folder-1",
    "folder-1/test",
    "folder-2/hello",
    "folder-2/hellow/collection",
)
DEMO_FILES: Final[tuple[tuple[str, bytes], ...]] = (
    ("folder-2/readme.md", "this is so cool 🤦‍♂️".encode()),
    ("folder-2/hellow/collection/virus.exe", b"this is cool"),
    ("main-readme.md", "y dsfs 54005 🥰🥰 🤦‍♂️".encode() * 1_000),
    ("main-readme2.md", b"this is so cool"),
)


class _OperationAction(argparse.Action):
    """Collect ``--directory`` and ``--file`` values in command-line order."""

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: str | Sequence[Any] | None,
        option_string: str | None = None,
    ) -> None:
        operations: list[Operation] = list(getattr(namespace, self.dest) or [])
        operations.append((self.const, str(values)))
        setattr(namespace, self.dest, operations)


def main(argv: Sequence[str] | None = None, *, stdout: TextIO | None = None) -> int:
    """Run the memtree CLI."""

    parser = _build_parser()
    try:
        args = parser.parse_args(list(argv) if argv is not None else None)
    except SystemExit as exc:  # argparse exits with code 2 on errors
        code = exc.code if isinstance(exc.code, int) else 2
        return int(code)

    configure_logging(level=args.log_level, json_mode=args.json_logs)
    logger = get_logger(__name__, context={"command": args.command})
    out = stdout if stdout is not None else sys.stdout

    try:
        config = load_config(args.config)
        tree = FileTree(config=config)
        if args.command == "demo":
            _build_demo(tree)
        else:
            _apply(tree, args.operations or [])
    except (MemtreeError, OSError) as error:
        logger.debug("Command failed.", event="memtree.cli.failed")
        print(f"error: {error}", file=sys.stderr)
        return 1

    rendered = tree.render()
    if rendered:
        print(rendered, file=out)
    return 0


def _build_demo(tree: FileTree) -> None:
    for path in DEMO_DIRECTORIES:
        _ = tree.create_directory(path)
    for path, contents in DEMO_FILES:
        _ = tree.create_file(path, contents)


def _apply(tree: FileTree, operations: Sequence[Operation]) -> None:
    for kind, value in operations:
        if kind == "directory":
            _ = tree.create_directory(value)
            continue
        path, _sep, text = value.partition("=")
        _ = tree.create_file(path, text.encode())


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="memtree",
        description="Build an in-memory file tree and print it.",
    )
    _ = parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="TOML or YAML file with tree limits.",
    )
    _ = parser.add_argument(
        "--log-level",
        choices=("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"),
        default=None,
        help="Override the log level emitted by the CLI.",
    )
    _ = parser.add_argument(
        "--json-logs",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="Emit structured JSON logs.",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    _ = subparsers.add_parser("demo", help="Print the sample tree.")

    build_parser = subparsers.add_parser(
        "build", help="Apply directory and file operations in order."
    )
    _ = build_parser.add_argument(
        "-d",
        "--directory",
        dest="operations",
        action=_OperationAction,
        const="directory",
        metavar="PATH",
        help="Create a directory and any missing parents.",
    )
    _ = build_parser.add_argument(
        "-f",
        "--file",
        dest="operations",
        action=_OperationAction,
        const="file",
        metavar="PATH[=TEXT]",
        help="Create a file under an existing directory.",
    )
    return parser


__all__ = ["DEMO_DIRECTORIES", "DEMO_FILES", "main"]
