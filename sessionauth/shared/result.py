# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Tagged results returned at the application boundary.

Use cases raise :class:`AppError` subclasses; :func:`capture` turns a call into
``Ok(value)`` or ``Err(error)`` so callers branch on the variant instead of
catching. ``unwrap`` re-raises the carried error for layers (HTTP) that still
want exception flow.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, Literal, NoReturn, TypeVar, Union

from sessionauth.shared.errors.base import AppError

T = TypeVar("T")


@dataclass(slots=True, frozen=True)
class Ok(Generic[T]):
    value: T
    ok: Literal[True] = True

    def unwrap(self) -> T:
        return self.value


@dataclass(slots=True, frozen=True)
class Err:
    error: AppError
    ok: Literal[False] = False

    def unwrap(self) -> NoReturn:
        raise self.error


Result = Union[Ok[T], Err]


def capture(func: Callable[..., T], *args: Any, **kwargs: Any) -> Result[T]:
    try:
        return Ok(func(*args, **kwargs))
    except AppError as exc:
        return Err(exc)


__all__ = ["Err", "Ok", "Result", "capture"]
