"""Selection strategies that pick a child node by the EV per big blind invested."""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Protocol, Sequence

from freedompoker.actions import to_bb


class SearchNode(Protocol):
    """A search-tree node: its children, its game context and its expected value."""

    children: Sequence["SearchNode"]
    context: Any

    def ev(self) -> float: ...


def _amount(node: SearchNode) -> Decimal:
    return to_bb(node.context.last_action.amount)


def split_by_amount(
    children: Sequence[SearchNode],
) -> tuple[list[SearchNode], list[SearchNode]]:
    """Split children into those whose last action cost chips and those that were free.

    Both lists keep the order of ``children``.
    """
    with_amount: list[SearchNode] = []
    no_amount: list[SearchNode] = []
    zero = to_bb(0)
    for child in children:
        (no_amount if _amount(child) == zero else with_amount).append(child)
    return with_amount, no_amount


def _ratio(node: SearchNode) -> float:
    return node.ev() / float(_amount(node))


def _free_action(no_amount: list[SearchNode]) -> SearchNode:
    if not no_amount:
        raise LookupError("no zero-amount action to fall back on")
    return no_amount[-1]


class BetamtEVRatioSelector:
    """Takes the costly action with the best EV/amount ratio if it reaches
    the threshold, otherwise the last free action (check or fold)."""

    def __init__(self, threshold: float = 1.0) -> None:
        self.threshold = float(threshold)

    def select(self, node: SearchNode) -> SearchNode:
        with_amount, no_amount = split_by_amount(node.children)
        if with_amount:
            best = max(with_amount, key=_ratio)
            if _ratio(best) >= self.threshold:
                return best
        return _free_action(no_amount)

    def __repr__(self) -> str:
        return f"BetamtEVRatioSelector(threshold={self.threshold!r})"


class FinalMoveSelector:
    """Chooses the move to play once a search has finished.

    Costly actions are tried from highest EV down; the first whose EV per
    amount invested reaches ``ev_threshold`` is chosen. If none does, the
    last free action (check or fold) is taken.
    """

    def __init__(
        self,
        ev_threshold: float = 1.0,
        big_raise_ev_multiplicator: float = 3.0,
        big_raise_multiplicator: float = 1.5,
    ) -> None:
        self.ev_threshold = float(ev_threshold)
        self.big_raise_ev_multiplicator = float(big_raise_ev_multiplicator)
        self.big_raise_multiplicator = float(big_raise_multiplicator)

    def select(self, node: SearchNode) -> SearchNode:
        with_amount, no_amount = split_by_amount(node.children)
        by_ev = sorted(with_amount, key=lambda child: child.ev(), reverse=True)
        for child in by_ev:
            if _ratio(child) >= self.ev_threshold:
                return child
        return _free_action(no_amount)

    def __repr__(self) -> str:
        return (
            "FinalMoveSelector("
            f"ev_threshold={self.ev_threshold!r}, "
            f"big_raise_ev_multiplicator={self.big_raise_ev_multiplicator!r}, "
            f"big_raise_multiplicator={self.big_raise_multiplicator!r})"
        )