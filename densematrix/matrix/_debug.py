"""Diagnostic text dump for matrices."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from densematrix.core.config import get_settings

if TYPE_CHECKING:
    from densematrix.matrix.matrix import Matrix


def format_dump(matrix: Matrix) -> str:
    """
    Render the dump text: a size line, one line per row with each cell
    to three decimals followed by a space, then a blank line.
    """
    lines = [f"size: {matrix.rows} x {matrix.cols}"]
    for row in matrix:
        lines.append("".join(_format_cell(value) for value in row))
    return "\n".join(lines) + "\n\n"


def _format_cell(value) -> str:
    # Fraction only gained __format__ in 3.12; complex has no float()
    if isinstance(value, complex):
        return f"{value:.3f} "
    return f"{float(value):.3f} "


def write_dump(matrix: Matrix, sink: TextIO | None = None) -> bool:
    """
    Write the dump if debugging is enabled.

    Args:
        matrix: Matrix to dump
        sink: Stream to write to; defaults to the configured sink, then
            sys.stderr

    Returns:
        True if anything was written
    """
    settings = get_settings()
    if not settings.debug:
        return False
    stream = sink if sink is not None else settings.sink
    if stream is None:
        stream = sys.stderr
    stream.write(format_dump(matrix))
    return True
