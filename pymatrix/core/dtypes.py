"""
Numeric kinds supported as matrix elements.

This module is the SINGLE SOURCE OF TRUTH for which numpy dtypes a Matrix
may hold and for the per-kind constants (additive and multiplicative
identity) and token parsers that the rest of the package relies on.

Usage:
    from pymatrix.core.dtypes import kind_of

    kind = kind_of('int32')
    kind.zero, kind.one       # np.int32(0), np.int32(1)
    kind.parse(' 42 '.strip())
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable

import numpy as np
from numpy.typing import DTypeLike

from pymatrix.core.exceptions import DTypeError


_INTEGER_TOKEN = re.compile(r'[+-]?[0-9]+')
_UNSIGNED_TOKEN = re.compile(r'[+]?[0-9]+')
_FLOAT_TOKEN = re.compile(
    r'[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)',
    re.IGNORECASE,
)


@dataclass(frozen=True)
class NumericKind:
    """
    Capabilities of one element kind.

    Attributes:
        name: Canonical dtype name ('int32', 'float64', ...)
        dtype: The numpy dtype
        zero: Additive identity as a numpy scalar of this kind
        one: Multiplicative identity as a numpy scalar of this kind
        is_integer: True for the fixed-width integer kinds
        is_signed: False only for the unsigned integer kinds
    """
    name: str
    dtype: np.dtype
    zero: Any
    one: Any
    is_integer: bool
    is_signed: bool
    _parser: Callable[['NumericKind', str], Any]

    def parse(self, token: str) -> Any:
        """
        Parse a single trimmed token as a scalar of this kind.

        Raises:
            ValueError: If the token is not a literal of this kind or does
                not fit in its range.
        """
        return self._parser(self, token)

    def __repr__(self) -> str:
        return f"NumericKind({self.name})"


def _parse_integer(kind: NumericKind, token: str) -> Any:
    grammar = _INTEGER_TOKEN if kind.is_signed else _UNSIGNED_TOKEN
    if not grammar.fullmatch(token):
        raise ValueError(f"invalid {kind.name} literal: {token!r}")
    value = int(token)
    info = np.iinfo(kind.dtype)
    if value < info.min or value > info.max:
        raise ValueError(
            f"{token!r} out of range for {kind.name} [{info.min}, {info.max}]"
        )
    return kind.dtype.type(value)


def _parse_float(kind: NumericKind, token: str) -> Any:
    if not _FLOAT_TOKEN.fullmatch(token):
        raise ValueError(f"invalid {kind.name} literal: {token!r}")
    # Narrowing to float32 saturates to inf the same way a direct parse does
    with np.errstate(over='ignore'):
        return kind.dtype.type(float(token))


def _make_kind(name: str) -> NumericKind:
    dtype = np.dtype(name)
    is_integer = bool(np.issubdtype(dtype, np.integer))
    return NumericKind(
        name=name,
        dtype=dtype,
        zero=dtype.type(0),
        one=dtype.type(1),
        is_integer=is_integer,
        is_signed=bool(np.issubdtype(dtype, np.signedinteger)) or not is_integer,
        _parser=_parse_integer if is_integer else _parse_float,
    )


SUPPORTED_KINDS: dict[str, NumericKind] = {
    name: _make_kind(name)
    for name in (
        'int8', 'int16', 'int32', 'int64',
        'uint8', 'uint16', 'uint32', 'uint64',
        'float32', 'float64',
    )
}

# Kind used by parse_matrix when the caller does not name one
DEFAULT_PARSE_DTYPE = np.dtype('int64')

# Division always promotes both operands to this kind
DIVISION_DTYPE = np.dtype('float64')


def kind_of(dtype: DTypeLike) -> NumericKind:
    """
    Look up the NumericKind for a dtype-like value.

    Args:
        dtype: Anything numpy accepts as a dtype (np.int32, 'float64', int)

    Returns:
        The registered NumericKind

    Raises:
        DTypeError: If the dtype is not understood or not supported
    """
    try:
        resolved = np.dtype(dtype)
    except TypeError as e:
        raise DTypeError(f"not a dtype: {dtype!r}", actual=repr(dtype)) from e

    kind = SUPPORTED_KINDS.get(resolved.name)
    if kind is None:
        raise DTypeError(
            f"unsupported element kind {resolved.name}, expected one of "
            f"{', '.join(SUPPORTED_KINDS)}",
            actual=resolved.name,
        )
    return kind


__all__ = [
    'NumericKind',
    'SUPPORTED_KINDS',
    'DEFAULT_PARSE_DTYPE',
    'DIVISION_DTYPE',
    'kind_of',
]
