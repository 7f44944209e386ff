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

"""Design by contract utilities for :mod:`leafutils`.

Contracts are off by default. Set ``LEAFUTILS_DBC=1`` (or call
:func:`enable_dbc`) to evaluate them; a failing contract raises
``AssertionError``. Argument validation that callers rely on is never
expressed as a contract, since it must run regardless of this flag.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Iterator, Mapping, Sequence
from contextlib import contextmanager
from functools import wraps
from typing import ParamSpec, TypeVar, cast

P = ParamSpec("P")
R = TypeVar("R")
T = TypeVar("T", bound=object)

ContractResult = bool | tuple[bool, str]
ContractCallable = Callable[..., ContractResult | object]

DBC_ENV = "LEAFUTILS_DBC"
_forced_state: bool | None = None


def _coerce_flag(value: str | None) -> bool:
    if value is None:
        return False
    return value.strip().lower() not in {"", "0", "false", "off", "no"}


def dbc_active() -> bool:
    """Return ``True`` when contract checks should run."""

    if _forced_state is not None:
        return _forced_state
    return _coerce_flag(os.getenv(DBC_ENV))


def enable_dbc() -> None:
    """Force contract enforcement on, ignoring the environment."""

    global _forced_state
    _forced_state = True


def disable_dbc() -> None:
    """Force contract enforcement off, ignoring the environment."""

    global _forced_state
    _forced_state = False


@contextmanager
def dbc_enabled(*, active: bool = True) -> Iterator[None]:
    """Temporarily set the contract flag inside a ``with`` block."""

    global _forced_state
    previous = _forced_state
    _forced_state = active
    try:
        yield
    finally:
        _forced_state = previous


def _qualname(target: object) -> str:
    return getattr(target, "__qualname__", repr(target))


def _normalize(result: ContractResult | object) -> tuple[bool, str | None]:
    if isinstance(result, tuple):
        items = cast(Sequence[object], result)
        if not items:
            raise TypeError("Contract callables must not return empty tuples")
        return bool(items[0]), None if len(items) == 1 else str(items[1])
    return bool(result), None


def _evaluate(
    *,
    kind: str,
    func: Callable[..., object],
    predicate: ContractCallable,
    args: tuple[object, ...],
    kwargs: Mapping[str, object],
) -> None:
    try:
        result = predicate(*args, **kwargs)
    except AssertionError:
        raise
    except Exception as exc:
        msg = f"{kind} contract for {_qualname(func)} raised {type(exc).__name__}: {exc}"
        raise AssertionError(msg) from exc
    outcome, detail = _normalize(result)
    if outcome:
        return
    predicate_name = getattr(predicate, "__name__", repr(predicate))
    msg = f"{kind} contract for {_qualname(func)} failed via {predicate_name}."
    if detail:
        msg = f"{msg} Details: {detail}"
    raise AssertionError(msg)


def ensure(*predicates: ContractCallable) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Validate postconditions once the callable returns or raises.

    Predicates receive the call's arguments plus ``result=`` on return or
    ``exception=`` when the callable raised.
    """

    if not predicates:
        raise ValueError("@ensure expects at least one predicate")

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        @wraps(func)
        def wrapped(*args: P.args, **kwargs: P.kwargs) -> R:
            if not dbc_active():
                return func(*args, **kwargs)
            try:
                result = func(*args, **kwargs)
            except Exception as exc:
                for predicate in predicates:
                    _evaluate(
                        kind="ensure",
                        func=func,
                        predicate=predicate,
                        args=tuple(args),
                        kwargs={**kwargs, "exception": exc},
                    )
                raise
            for predicate in predicates:
                _evaluate(
                    kind="ensure",
                    func=func,
                    predicate=predicate,
                    args=tuple(args),
                    kwargs={**kwargs, "result": result},
                )
            return result

        return wrapped

    return decorator


def _wrap_with_invariants(
    method: Callable[..., object], predicates: tuple[ContractCallable, ...]
) -> Callable[..., object]:
    @wraps(method)
    def wrapper(self: object, *args: object, **kwargs: object) -> object:
        if not dbc_active():
            return method(self, *args, **kwargs)
        for predicate in predicates:
            _evaluate(
                kind="invariant", func=method, predicate=predicate, args=(self,), kwargs={}
            )
        try:
            return method(self, *args, **kwargs)
        finally:
            for predicate in predicates:
                _evaluate(
                    kind="invariant",
                    func=method,
                    predicate=predicate,
                    args=(self,),
                    kwargs={},
                )

    return wrapper


def invariant(*predicates: ContractCallable) -> Callable[[type[T]], type[T]]:
    """Check class invariants after ``__init__`` and around public methods.

    Only callables defined directly on the decorated class are wrapped;
    names starting with an underscore, properties, static methods and class
    methods are left alone.
    """

    if not predicates:
        raise ValueError("@invariant expects at least one predicate")
    checks = tuple(predicates)

    def decorator(cls: type[T]) -> type[T]:
        original_init = cls.__init__

        @wraps(original_init)
        def init_wrapper(self: object, *args: object, **kwargs: object) -> None:
            original_init(self, *args, **kwargs)
            if dbc_active():
                for predicate in checks:
                    _evaluate(
                        kind="invariant",
                        func=original_init,
                        predicate=predicate,
                        args=(self,),
                        kwargs={},
                    )

        type.__setattr__(cls, "__init__", init_wrapper)
        for name, attribute in list(cls.__dict__.items()):
            if name.startswith("_") or not callable(attribute):
                continue
            if isinstance(attribute, (staticmethod, classmethod)):
                continue
            setattr(cls, name, _wrap_with_invariants(attribute, checks))
        return cls

    return decorator


__all__ = [
    "DBC_ENV",
    "dbc_active",
    "dbc_enabled",
    "disable_dbc",
    "enable_dbc",
    "ensure",
    "invariant",
]
