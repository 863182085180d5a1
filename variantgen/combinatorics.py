from __future__ import annotations
from typing import List, Sequence, Tuple, TypeVar

T = TypeVar("T")


def cartesian(dimensions: Sequence[Sequence[T]]) -> List[Tuple[T, ...]]:
    """Cross product of ``dimensions``, last dimension varying fastest.

    No dimensions yields a single empty tuple, so "no variation" still
    expands to one combination.
    """
    combos: List[Tuple[T, ...]] = [()]
    for values in dimensions:
        combos = [combo + (v,) for combo in combos for v in values]
    return combos
