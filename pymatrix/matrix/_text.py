"""
Canonical text form of a matrix.

    [e00,e01,...;e10,e11,...;...]

Rows are separated by ';', elements within a row by ','. Output carries no
whitespace; input is trimmed at the outer level and per token.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.dtypes import NumericKind
from pymatrix.core.exceptions import ParseErrorKind, ParseMatrixError


OPEN_BRACKET = '['
CLOSE_BRACKET = ']'
ROW_SEPARATOR = ';'
COLUMN_SEPARATOR = ','


def _format_integer(value: Any) -> str:
    return str(int(value))


def _format_float(value: Any) -> str:
    if np.isnan(value):
        return 'NaN'
    # Shortest round-tripping digits for the kind, positional, no trailing '.0'
    return np.format_float_positional(value, trim='-')


def format_elements(data: NDArray[Any], col: int, kind: NumericKind) -> str:
    """
    Render row-major storage in the canonical text form.

    Parameters
    ----------
    data : NDArray
        Flat row-major storage.
    col : int
        Number of columns (row length).
    kind : NumericKind
        Element kind, selects integer or float formatting.
    """
    n = data.shape[0]
    if n == 0:
        return OPEN_BRACKET + CLOSE_BRACKET

    fmt = _format_integer if kind.is_integer else _format_float
    parts = [OPEN_BRACKET]
    for idx, value in enumerate(data):
        parts.append(fmt(value))
        if idx == n - 1:
            break
        parts.append(ROW_SEPARATOR if (idx + 1) % col == 0 else COLUMN_SEPARATOR)
    parts.append(CLOSE_BRACKET)
    return ''.join(parts)


def parse_elements(text: str, kind: NumericKind) -> tuple[NDArray[Any], int, int]:
    """
    Parse the canonical text form into row-major storage.

    Parsing is strictly left to right and stops at the first violation.

    Parameters
    ----------
    text : str
        Input string.
    kind : NumericKind
        Kind every element must parse as.

    Returns
    -------
    data : NDArray
        Flat row-major storage of ``kind``.
    row : int
        Number of ';'-separated groups.
    col : int
        Number of elements in the first group.

    Raises
    ------
    ParseMatrixError
        kind WRONG_BRACKET_FORMAT, COLUMNS_NOT_ALIGNED or PARSE_NUMBER_ERROR.
    """
    s = text.strip()
    if len(s) < 2 or s[0] != OPEN_BRACKET or s[-1] != CLOSE_BRACKET:
        raise ParseMatrixError(
            f"expected text enclosed in '{OPEN_BRACKET}' and '{CLOSE_BRACKET}', got {text!r}",
            kind=ParseErrorKind.WRONG_BRACKET_FORMAT,
            text=text,
        )

    body = s[1:-1]
    values: list[Any] = []
    n_rows, n_cols = 0, 0

    for idx, row_text in enumerate(body.split(ROW_SEPARATOR)):
        tokens = row_text.split(COLUMN_SEPARATOR)
        if idx == 0:
            n_cols = len(tokens)
        elif len(tokens) != n_cols:
            raise ParseMatrixError(
                f"row {idx} has {len(tokens)} elements, expected {n_cols}",
                kind=ParseErrorKind.COLUMNS_NOT_ALIGNED,
                text=text,
                detail=row_text,
            )
        n_rows += 1

        for token in tokens:
            token = token.strip()
            try:
                values.append(kind.parse(token))
            except ValueError as e:
                raise ParseMatrixError(
                    f"row {idx}: cannot parse {token!r} as {kind.name}",
                    kind=ParseErrorKind.PARSE_NUMBER_ERROR,
                    text=text,
                    detail=token,
                ) from e

    return np.array(values, dtype=kind.dtype), n_rows, n_cols
