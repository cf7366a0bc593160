"""A poker player taking part in a simulated game."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Mapping

from freedompoker.actions import (
    ActionSequence,
    PhaseType,
    SchemaError,
    StatusType,
    parse_action_sequence,
    to_bb,
)


def load_status(data: Mapping[str, Any]) -> StatusType:
    """Read the player status from a JSON object."""
    try:
        text = data["status"]
    except (KeyError, TypeError) as exc:
        raise SchemaError("player status missing") from exc
    try:
        return StatusType(text)
    except ValueError as exc:
        raise ValueError(f"unknown status type: {text!r}") from exc


def _zero_investments() -> list[Decimal]:
    return [to_bb(0)] * 4


@dataclass
class Player:
    """Bankroll, per-phase investments, status and history of one player."""

    bankroll: Decimal
    invested: list[Decimal] = field(default_factory=_zero_investments)
    handlist: Any = None
    model: str = "default"
    status: StatusType = StatusType.ACTIVE
    action_sequence: ActionSequence = field(default_factory=ActionSequence)

    def __post_init__(self) -> None:
        self.bankroll = to_bb(self.bankroll)
        self.invested = [to_bb(amount) for amount in self.invested]

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "Player":
        status = load_status(data)
        try:
            return cls(
                bankroll=to_bb(float(data["bankroll"])),
                invested=[to_bb(float(amount)) for amount in data["invested"]],
                model=str(data["model"]),
                status=status,
                action_sequence=parse_action_sequence(data["sequence"]),
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise SchemaError(f"invalid player: {exc}") from exc

    def make_investment(self, amount: Decimal, phase: PhaseType) -> bool:
        """Move ``amount`` from the bankroll into the pot for ``phase``.

        Returns False, changing nothing, if the bankroll cannot cover it.
        """
        amount = to_bb(amount)
        if self.bankroll < amount:
            return False
        self.bankroll -= amount
        self.invested[int(phase)] += amount
        return True

    def total_investment(self) -> Decimal:
        return sum(self.invested[:4], to_bb(0))

    def is_active(self) -> bool:
        return self.status is StatusType.ACTIVE

    def is_inactive(self) -> bool:
        return self.status is StatusType.INACTIVE

    def is_allin(self) -> bool:
        return self.status is StatusType.ALLIN

    def set_inactive(self) -> None:
        self.status = StatusType.INACTIVE

    def set_active(self) -> None:
        self.status = StatusType.ACTIVE

    def set_allin(self) -> None:
        self.status = StatusType.ALLIN

    def copy(self) -> "Player":
        """An independent copy; the hand list is shared."""
        return Player(
            bankroll=self.bankroll,
            invested=list(self.invested),
            handlist=self.handlist,
            model=self.model,
            status=self.status,
            action_sequence=ActionSequence(self.action_sequence),
        )