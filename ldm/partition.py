import heapq
from typing import Any, Iterable, NamedTuple

class Bipartition(NamedTuple):
    group_1: list[Any]
    group_2: list[Any]
    difference: int


class PartialResult:

    def __init__(self, item: Any, size: int) -> None:
        assert size >= 0, f"size of {item!r} is negative: {size}"
        self.group_a: list[Any] = [item]
        self.group_b: list[Any] = []
        self.difference: int = size

    def merge(self, other: "PartialResult") -> "PartialResult":
        # `other` is consumed: its sides are placed opposite to ours so
        # that its imbalance cancels against ours.
        assert self.difference >= other.difference, \
            f"{self.difference} < {other.difference}"
        self.group_a.extend(other.group_b)
        self.group_b.extend(other.group_a)
        self.difference -= other.difference
        return self

    def to_bipartition(self) -> Bipartition:
        return Bipartition(self.group_a, self.group_b, self.difference)

    def __lt__(self, other: "PartialResult") -> bool:
        # heapq is a min-heap, so larger differences come first
        return self.difference > other.difference

    def __repr__(self) -> str:
        return f"PartialResult({self.group_a}, {self.group_b}, difference={self.difference})"


def largest_differencing_method(items: Iterable[tuple[Any, int]]) -> Bipartition:
    """ split items into two groups with the Karmarkar-Karp largest
        differencing method, the two largest pending differences are
        repeatedly merged until a single partial result remains
    Parameters:
        items (Iterable[Tuple[Any, int]]):
            pairs of (item, size), sizes must be non-negative. Items are
            kept by reference, duplicates count as distinct items
    Returns:
        bipartition (Bipartition):
            both groups and the absolute difference of their size sums
    """
    results_pq: list[PartialResult] = [
        PartialResult(item, size) for item, size in items
    ]
    if len(results_pq) == 0:
        return Bipartition([], [], 0)
    heapq.heapify(results_pq)

    while len(results_pq) > 1:
        hi: PartialResult = heapq.heappop(results_pq)
        lo: PartialResult = heapq.heappop(results_pq)
        heapq.heappush(results_pq, hi.merge(lo))

    return results_pq[0].to_bipartition()
