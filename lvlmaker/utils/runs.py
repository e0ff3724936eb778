"""Run detection along one line of classified cells."""

from __future__ import annotations

from collections.abc import Sequence

from lvlmaker.engine.palette import SquareType


def run_end(cells: Sequence[int], index: int, square: SquareType = SquareType.WALL) -> int:
    """Return the index of the last cell of the run of ``square`` starting at ``index``.

    ``cells[index]`` is expected to be ``square`` already; the returned index is
    ``index`` itself for a run of one.
    """
    last = index
    while last + 1 < len(cells) and cells[last + 1] == square:
        last += 1
    return last
