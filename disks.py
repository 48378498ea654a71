# ============================================================
# DiskSorter - Alternating Disks
# ============================================================
#
# A row of 2n disks starts out alternating light / dark:
#
#     L D L D L D L D
#
# and has to end up with every light disk on the left:
#
#     L L L L D D D D
#
# The only move allowed is swapping two neighbouring disks.
# Two algorithms are provided, each as a step generator that
# yields (row, [active_indices]) after every swap, and as a
# sort function that counts the swaps on a private copy.
# ============================================================

import logging
import operator
from dataclasses import dataclass
from enum import IntEnum

import numpy as np

logger = logging.getLogger(__name__)


def _as_int(value, what):
    # bool is an int subclass but would index numpy as a mask.
    if isinstance(value, bool):
        raise TypeError(f"{what} must be an int, got bool")
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(f"{what} must be an int, got {type(value).__name__}") from None


class DiskColor(IntEnum):
    LIGHT = 0
    DARK  = 1

    @property
    def letter(self) -> str:
        return "L" if self is DiskColor.LIGHT else "D"


# ============================================================
# ======================== DISK STATE ========================
# ============================================================

class DiskState:
    """
    One row of disks.

    The colors live in a uint8 numpy array that is only ever changed
    through swap(), so the light / dark split fixed at construction
    holds for the lifetime of the row.
    """

    def __init__(self, light_count: int):
        light_count = _as_int(light_count, "light_count")
        if light_count <= 0:
            raise ValueError(f"light_count must be positive, got {light_count}")
        self._colors = np.full(light_count * 2, DiskColor.LIGHT, dtype=np.uint8)
        self._colors[1::2] = DiskColor.DARK

    def copy(self) -> "DiskState":
        other = DiskState.__new__(DiskState)
        other._colors = self._colors.copy()
        return other

    def __eq__(self, other):
        if not isinstance(other, DiskState):
            return NotImplemented
        return np.array_equal(self._colors, other._colors)

    __hash__ = None

    def total_count(self) -> int:
        return len(self._colors)

    def dark_count(self) -> int:
        return self.total_count() // 2

    def light_count(self) -> int:
        return self.dark_count()

    def is_index(self, i: int) -> bool:
        return 0 <= _as_int(i, "disk index") < self.total_count()

    def get(self, index: int) -> DiskColor:
        index = _as_int(index, "disk index")
        if not self.is_index(index):
            raise IndexError(f"disk index out of range: {index} (total {self.total_count()})")
        return DiskColor(int(self._colors[index]))

    def swap(self, left_index: int) -> None:
        left_index = _as_int(left_index, "disk index")
        right_index = left_index + 1
        if not (self.is_index(left_index) and self.is_index(right_index)):
            raise IndexError(
                f"cannot swap {left_index} and {right_index} (total {self.total_count()})"
            )
        c = self._colors
        c[left_index], c[right_index] = c[right_index], c[left_index]

    def to_string(self) -> str:
        return " ".join(DiskColor(int(c)).letter for c in self._colors)

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return f"DiskState({self.to_string()!r})"

    def is_alternating(self) -> bool:
        """Light at index 0, then every neighbour differs: L D L D ..."""
        c = self._colors
        return bool(c[0] == DiskColor.LIGHT and np.all(c[1:] != c[:-1]))

    def is_sorted(self) -> bool:
        """No dark disk in the lower half. Exact because the split is 50/50."""
        return not bool(np.any(self._colors[:self.total_count() // 2] == DiskColor.DARK))


@dataclass(frozen=True)
class SortedDisks:
    """Final row of a sort together with the number of swaps it took."""
    after:      DiskState
    swap_count: int


# ============================================================
# ===================== SORTING ALGORITHMS ===================
# ============================================================

def _require_alternating(row: DiskState):
    if not row.is_alternating():
        raise ValueError(f"disks must start in alternating format, got: {row}")


def _sweep_right(row):
    # A dark disk that was just swapped keeps travelling right in the same pass.
    for j in range(row.total_count() - 1):
        if row.get(j) == DiskColor.DARK and row.get(j+1) == DiskColor.LIGHT:
            row.swap(j); yield row, [j, j+1]


def _sweep_left(row):
    for j in range(row.total_count() - 1, 0, -1):
        if row.get(j) == DiskColor.LIGHT and row.get(j-1) == DiskColor.DARK:
            row.swap(j-1); yield row, [j-1, j]


def _left_to_right(row):
    for _ in range(row.dark_count()):
        yield from _sweep_right(row)


def _lawnmower(row):
    # dark_count() // 2 round trips, truncated for odd counts.
    for _ in range(row.dark_count() // 2):
        yield from _sweep_right(row)
        yield from _sweep_left(row)


def left_to_right_steps(row: DiskState):
    """Sort `row` in place, yielding (row, [i, i+1]) after every swap."""
    _require_alternating(row)
    return _left_to_right(row)


def lawnmower_steps(row: DiskState):
    """Sort `row` in place with back-and-forth passes, yielding after every swap."""
    _require_alternating(row)
    return _lawnmower(row)


def _run(steps, row: DiskState, name: str) -> SortedDisks:
    sorted_row = row.copy()
    swaps = sum(1 for _ in steps(sorted_row))
    logger.debug("%s sort of %d disks finished with %d swaps",
                 name, sorted_row.total_count(), swaps)
    return SortedDisks(sorted_row, swaps)


def sort_left_to_right(before: DiskState) -> SortedDisks:
    return _run(left_to_right_steps, before, "left-to-right")


def sort_lawnmower(before: DiskState) -> SortedDisks:
    return _run(lawnmower_steps, before, "lawnmower")


# ============================================================
# ========================= REGISTRY =========================
# ============================================================

ALGORITHMS = [
    ("Left-to-Right", "left_to_right"),
    ("Lawnmower",     "lawnmower"),
]


def get_generator(key, row):
    builtins = {
        "left_to_right": lambda: left_to_right_steps(row),
        "lawnmower":     lambda: lawnmower_steps(row),
    }
    if key in builtins: return builtins[key]()
    raise KeyError(f"Unknown key: {key}")
