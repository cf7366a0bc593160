"""Hands with equities, bucket collections and the bucketizers that fill them."""

from __future__ import annotations

import math
from dataclasses import dataclass
from functools import total_ordering
from typing import Iterable, Iterator, Sequence, Union


@total_ordering
@dataclass(eq=False)
class BucketHand:
    """A poker hand together with its equity; hands compare by equity."""

    hand: object
    equity: float

    def str(self, print_equity: bool = False) -> "builtins_str":
        text = format(self.hand)
        if print_equity:
            text += f"\t{self.equity:.6f}"
        return text

    def __str__(self) -> "builtins_str":
        return format(self.hand)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BucketHand):
            return NotImplemented
        return self.equity == other.equity

    def __lt__(self, other: "BucketHand") -> bool:
        if not isinstance(other, BucketHand):
            return NotImplemented
        return self.equity < other.equity

    __hash__ = None  # type: ignore[assignment]


builtins_str = type("")

Bucket = list


class BucketCollection:
    """An ordered list of buckets, each a list of hands."""

    def __init__(self, buckets: Union[int, Iterable[Iterable[BucketHand]]] = 0) -> None:
        if isinstance(buckets, int):
            self.buckets: list[list[BucketHand]] = [[] for _ in range(buckets)]
        else:
            self.buckets = [list(bucket) for bucket in buckets]

    def __getitem__(self, index: int) -> list[BucketHand]:
        return self.buckets[index]

    def __len__(self) -> int:
        return len(self.buckets)

    def __iter__(self) -> Iterator[list[BucketHand]]:
        return iter(self.buckets)

    def __repr__(self) -> builtins_str:
        return f"BucketCollection({self.buckets!r})"

    def get_bucket_index_including_nb_hands(
        self, nb_hands: int, bucket_offset: int = 0
    ) -> int:
        """Index of the first bucket at which the running hand count reaches
        ``nb_hands``, starting at ``bucket_offset``; the last index if never."""
        total = 0
        for index in range(bucket_offset, len(self.buckets)):
            total += len(self.buckets[index])
            if total >= nb_hands:
                return index
        return len(self.buckets) - 1

    def hand_bucket_range(self, lower_bound: int, upper_bound: int) -> list[BucketHand]:
        """All hands of the buckets from ``upper_bound`` to ``lower_bound`` inclusive."""
        if upper_bound < 0:
            return []
        return [
            hand
            for bucket in self.buckets[upper_bound : lower_bound + 1]
            for hand in bucket
        ]

    def bucket_range(self, lower_bound: int, upper_bound: int) -> "BucketCollection":
        """A new collection of the buckets from ``upper_bound`` to ``lower_bound``."""
        if upper_bound < 0:
            return BucketCollection(0)
        return BucketCollection(self.buckets[upper_bound : lower_bound + 1])

    def nb_hands(self) -> int:
        return sum(len(bucket) for bucket in self.buckets)

    def remove_empty_buckets(self) -> "BucketCollection":
        return BucketCollection(bucket for bucket in self.buckets if bucket)

    def nb_buckets(self) -> int:
        return len(self.buckets)

    def reverse(self) -> None:
        self.buckets.reverse()

    def hands(self) -> list[BucketHand]:
        return self.hand_bucket_range(0, self.nb_buckets() - 1)


class BalancedBucketizer:
    """Fills buckets in order with an equal number of hands each."""

    def map_hands(self, nb_buckets: int, hands: Sequence[BucketHand]) -> BucketCollection:
        collection = BucketCollection(nb_buckets)
        if not hands or nb_buckets <= 0:
            return collection
        divisor = min(len(hands), nb_buckets)
        per_bucket = math.ceil(len(hands) / divisor)
        remaining = iter(hands)
        for bucket in collection:
            for _, hand in zip(range(per_bucket), remaining):
                bucket.append(hand)
        return collection


class ExponentialBucketizer:
    """Sizes buckets by ``1/i**2`` weights, so the strongest buckets are smallest."""

    def map_hands(self, nb_buckets: int, hands: Sequence[BucketHand]) -> BucketCollection:
        collection = BucketCollection(nb_buckets)
        weights = [1.0 / (i * i) for i in range(1, nb_buckets + 1)]
        weight_sum = sum(weights)
        sizes = [math.ceil((w / weight_sum) * len(hands)) for w in weights]

        from_end = reversed(hands)
        for bucket, size in zip(collection, sizes):
            bucket.extend(hand for _, hand in zip(range(size), from_end))
            bucket.reverse()
        collection.reverse()
        return collection