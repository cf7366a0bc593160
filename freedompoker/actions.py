"""Poker actions, phases, player states and action sequences."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum, IntEnum
from typing import Iterable, Iterator, NamedTuple, Sequence, Union

BB_PLACES = Decimal("0.01")

Number = Union[int, float, str, Decimal]


class SchemaError(RuntimeError):
    """Raised when a JSON document does not have the expected shape."""

    def __init__(self, message: str = "Message Parse Error") -> None:
        super().__init__(message)


class ActionType(Enum):
    NONE = "none"
    FOLD = "fold"
    CHECK = "check"
    CALL = "call"
    BET = "bet"
    RAISE = "raise"
    ALLIN = "allin"


class PhaseType(IntEnum):
    PREFLOP = 0
    FLOP = 1
    TURN = 2
    RIVER = 3
    SHOWDOWN = 4


class StatusType(Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    ALLIN = "allin"


def to_bb(value: Number) -> Decimal:
    """Convert a number of big blinds to a fixed-precision decimal."""
    if isinstance(value, Decimal):
        number = value
    elif isinstance(value, float):
        number = Decimal(str(value))
    else:
        number = Decimal(value)
    return number.quantize(BB_PLACES, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class Action:
    """An action type together with the amount it puts in."""

    action: ActionType
    amount: Decimal = Decimal(0)

    def __post_init__(self) -> None:
        object.__setattr__(self, "amount", to_bb(self.amount))


class SequenceEntry(NamedTuple):
    action: Action
    phase: PhaseType
    betting_round: int


@dataclass
class ActionSequence:
    """The actions one player took, in order, with phase and betting round."""

    entries: list[SequenceEntry] = field(default_factory=list)

    def __init__(self, entries: Iterable[SequenceEntry] = ()) -> None:
        self.entries = [SequenceEntry(*entry) for entry in entries]

    def append(self, action: Action, phase: PhaseType, betting_round: int) -> None:
        self.entries.append(SequenceEntry(action, PhaseType(phase), int(betting_round)))

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[SequenceEntry]:
        return iter(self.entries)


_ACTION_CODES = {
    "X": ActionType.CHECK,
    "F": ActionType.FOLD,
    "C": ActionType.CALL,
    "R": ActionType.RAISE,
    "B": ActionType.BET,
}


def resolve_action(code: str) -> ActionType:
    """Map a one-letter action code to its type; unknown codes give NONE."""
    return _ACTION_CODES.get(code, ActionType.NONE)


def parse_action_sequence(data: Sequence[Sequence[Sequence[object]]]) -> ActionSequence:
    """Build a sequence from four per-phase lists of ``[code, amount, round]``."""
    sequence = ActionSequence()
    try:
        for phase in (PhaseType.PREFLOP, PhaseType.FLOP, PhaseType.TURN, PhaseType.RIVER):
            for entry in data[phase]:
                code, amount, betting_round = entry[0], entry[1], entry[2]
                if not isinstance(code, str):
                    raise SchemaError("action code must be a string")
                action = Action(resolve_action(code), to_bb(float(amount)))
                sequence.append(action, phase, int(betting_round))
    except (IndexError, KeyError, TypeError, ValueError) as exc:
        raise SchemaError(f"invalid action sequence: {exc}") from exc
    return sequence