# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
A minimal `Result` type: either `Ok(value)` or `Err(error)`.

>>> Ok(3).map(lambda x: x * 2)
Ok(6)
>>> Err(ValueError('boom')).unwrap_or(0)
0
>>> Err('boom').is_err()
True
"""

from __future__ import annotations

from typing import Any, Callable, Generic, Literal, NoReturn, TypeAlias, TypeVar

T = TypeVar('T', covariant=True)  # Success type
E = TypeVar('E', covariant=True)  # Error type
U = TypeVar('U')
F = TypeVar('F')


class UnwrapError(Exception):
    """Raised when the wrong side of a `Result` is unwrapped."""

    def __init__(self, result: Result[Any, Any], message: str) -> None:
        self._result = result
        super().__init__(message)

    @property
    def result(self) -> Result[Any, Any]:
        return self._result


class Ok(Generic[T]):
    """
    A value that indicates success and which stores arbitrary data for the return value.
    """

    __slots__ = ('_value',)
    __match_args__ = ('_value',)

    def __init__(self, value: T) -> None:
        self._value = value

    def __repr__(self) -> str:
        return f'Ok({self._value!r})'

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, Ok) and self._value == other._value

    def __ne__(self, other: Any) -> bool:
        return not (self == other)

    def __hash__(self) -> int:
        return hash((True, self._value))

    def is_ok(self) -> Literal[True]:
        return True

    def is_err(self) -> Literal[False]:
        return False

    def ok(self) -> T:
        return self._value

    def err(self) -> None:
        return None

    def unwrap(self) -> T:
        return self._value

    def unwrap_err(self) -> NoReturn:
        raise UnwrapError(self, 'Called `Result.unwrap_err()` on an `Ok` value')

    def unwrap_or(self, _default: U) -> T:
        return self._value

    def unwrap_or_raise(self) -> T:
        return self._value

    def map(self, op: Callable[[T], U]) -> Ok[U]:
        return Ok(op(self._value))

    def map_err(self, _op: Callable[[E], F]) -> Ok[T]:
        return self


class Err(Generic[E]):
    """
    A value that signifies failure and which stores arbitrary data for the error.
    """

    __slots__ = ('_value',)
    __match_args__ = ('_value',)

    def __init__(self, value: E) -> None:
        self._value = value

    def __repr__(self) -> str:
        return f'Err({self._value!r})'

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, Err) and self._value == other._value

    def __ne__(self, other: Any) -> bool:
        return not (self == other)

    def __hash__(self) -> int:
        return hash((False, self._value))

    def is_ok(self) -> Literal[False]:
        return False

    def is_err(self) -> Literal[True]:
        return True

    def ok(self) -> None:
        return None

    def err(self) -> E:
        return self._value

    def unwrap(self) -> NoReturn:
        exc = UnwrapError(self, f'Called `Result.unwrap()` on an `Err` value: {self._value!r}')
        if isinstance(self._value, BaseException):
            raise exc from self._value
        raise exc

    def unwrap_err(self) -> E:
        return self._value

    def unwrap_or(self, default: U) -> U:
        return default

    def unwrap_or_raise(self) -> NoReturn:
        """
        The contained result is `Err`, so raise the exception with the value.
        """
        assert isinstance(self._value, Exception), (
            f'called `Result.unwrap_or_raise()` on non-exception value: {self._value}'
        )
        raise self._value

    def map(self, _op: Callable[[T], U]) -> Err[E]:
        return self

    def map_err(self, op: Callable[[E], F]) -> Err[F]:
        return Err(op(self._value))


Result: TypeAlias = Ok[T] | Err[E]
