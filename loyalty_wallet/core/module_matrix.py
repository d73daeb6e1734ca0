"""Module Matrix — fixed-size boolean grids and the pure rescaling that produces them.

Invariants:
    - Every BarcodeMatrix produced here is exactly size x size
    - True = dark module / bar, False = light
    - Scaling uses a single integer factor per symbol (no fractional modules)
    - Symbols are centered; a symbol larger than the grid is cropped symmetrically
    - 1D symbols repeat the same row for the full height

Design Decisions:
    - Tuples of tuples: immutable, hashable, safe to share across threads
    - Quiet zone counted in modules before choosing the factor, like common
      barcode writers do, so scanners always get a light margin when it fits
"""

from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class BarcodeMatrix:
    """Square grid of modules ready for rendering."""

    rows: tuple[tuple[bool, ...], ...]

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @property
    def size(self) -> int:
        return self.height

    @property
    def is_square(self) -> bool:
        return self.width == self.height

    @property
    def dark_count(self) -> int:
        return sum(sum(row) for row in self.rows)

    def __getitem__(self, position: tuple[int, int]) -> bool:
        x, y = position
        return self.rows[y][x]


def _axis_map(output: int, input_len: int, factor: int) -> list[int]:
    """For each output coordinate, the source module index or -1 for light padding."""
    offset = (output - input_len * factor) // 2
    mapping = []
    for out in range(output):
        src = (out - offset) // factor if out >= offset else -1
        mapping.append(src if 0 <= src < input_len else -1)
    return mapping


def scale_2d(
    modules: Sequence[Sequence[bool]], size: int, quiet_zone: int,
) -> BarcodeMatrix:
    """Scale an n x m module grid into a centered size x size matrix."""
    if size < 1:
        raise ValueError(f"size must be >= 1, got {size}")
    height = len(modules)
    width = len(modules[0]) if height else 0
    if not width:
        raise ValueError("cannot scale an empty symbol")

    factor = max(
        min(size // (width + 2 * quiet_zone), size // (height + 2 * quiet_zone)),
        1,
    )
    cols = _axis_map(size, width, factor)
    blank = (False,) * size
    rows = []
    for src_y in _axis_map(size, height, factor):
        if src_y < 0:
            rows.append(blank)
            continue
        line = modules[src_y]
        rows.append(tuple(bool(line[c]) if c >= 0 else False for c in cols))
    return BarcodeMatrix(rows=tuple(rows))


def scale_1d(bars: Sequence[bool], size: int, side_margin: int) -> BarcodeMatrix:
    """Stretch a row of bars across a size x size matrix.

    side_margin is the total quiet zone in modules, split across both sides.
    """
    if size < 1:
        raise ValueError(f"size must be >= 1, got {size}")
    if not bars:
        raise ValueError("cannot scale an empty symbol")

    factor = max(size // (len(bars) + side_margin), 1)
    row = tuple(
        bool(bars[c]) if c >= 0 else False
        for c in _axis_map(size, len(bars), factor)
    )
    return BarcodeMatrix(rows=(row,) * size)
