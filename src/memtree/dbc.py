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

"""Opt-in postcondition checks for :mod:`memtree`.

Contracts are skipped unless ``MEMTREE_DBC`` is truthy or checks have been
forced on with :func:`dbc_enabled`. A failing contract raises
``AssertionError`` naming the wrapped callable and the predicate.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from functools import wraps
from typing import ParamSpec, TypeVar

P = ParamSpec("P")
R = TypeVar("R")

ContractCallable = Callable[..., bool | tuple[bool, str]]

_ENV_FLAG = "MEMTREE_DBC"
_forced_state: bool | None = None


def _coerce_flag(value: str | None) -> bool:
    if value is None:
        return False
    return value.strip().lower() not in {"", "0", "false", "off", "no"}


def dbc_active() -> bool:
    """Return ``True`` when contract checks should run."""

    if _forced_state is not None:
        return _forced_state
    return _coerce_flag(os.getenv(_ENV_FLAG))


@contextmanager
def dbc_enabled(*, active: bool = True) -> Iterator[None]:
    """Temporarily force contract checks on (or off) inside a ``with`` block."""

    global _forced_state
    previous = _forced_state
    _forced_state = active
    try:
        yield
    finally:
        _forced_state = previous


def ensure(
    *predicates: ContractCallable,
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Check postconditions after the wrapped callable returns.

    Each predicate receives the call's positional and keyword arguments
    followed by ``result=<return value>``. It returns a bool, or a
    ``(bool, detail)`` tuple to add context to the failure message.
    """

    if not predicates:
        raise ValueError("ensure() requires at least one predicate.")

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            result = func(*args, **kwargs)
            if dbc_active():
                for predicate in predicates:
                    _check(func, predicate, predicate(*args, result=result, **kwargs))
            return result

        return wrapper

    return decorator


def _check(
    func: Callable[..., object],
    predicate: ContractCallable,
    outcome: bool | tuple[bool, str],
) -> None:
    detail: str | None = None
    if isinstance(outcome, tuple):
        passed, detail = outcome
    else:
        passed = outcome
    if passed:
        return
    predicate_name = getattr(predicate, "__name__", repr(predicate))
    message = f"Postcondition for {func.__qualname__} failed via {predicate_name}."
    if detail:
        message = f"{message} Details: {detail}"
    raise AssertionError(message)


__all__ = ["dbc_active", "dbc_enabled", "ensure"]
