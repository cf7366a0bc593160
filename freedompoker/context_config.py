"""Game settings that stay fixed for a whole hand."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from freedompoker.actions import SchemaError


@dataclass
class ContextConfig:
    """Betting-round limit, rake, bot hand, board and bet/raise sizes."""

    bot_hand: Any
    betting_rounds: int
    board: list[int] = field(default_factory=list)
    bet_sizes: list[float] = field(default_factory=list)
    raise_sizes: list[float] = field(default_factory=list)
    rake_factor: float = 0.0

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "ContextConfig":
        try:
            hand = data["bot_hand"]
            return cls(
                bot_hand=(int(hand[0]), int(hand[1])),
                betting_rounds=int(data["betting_rounds"]),
                board=[int(card) for card in data["board"]],
                bet_sizes=[float(size) for size in data["bet_sizes"]],
                raise_sizes=[float(size) for size in data["raise_sizes"]],
                rake_factor=float(data["rake"]),
            )
        except (IndexError, KeyError, TypeError, ValueError) as exc:
            raise SchemaError(f"invalid context config: {exc}") from exc