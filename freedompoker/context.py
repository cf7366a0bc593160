"""The state of a poker hand as seen by the bot, and its transitions."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Mapping

from freedompoker.actions import (
    Action,
    ActionType,
    PhaseType,
    SchemaError,
    to_bb,
)
from freedompoker.context_config import ContextConfig
from freedompoker.player import Player

_PHASE_NAMES = {
    "preflop": PhaseType.PREFLOP,
    "flop": PhaseType.FLOP,
    "turn": PhaseType.TURN,
    "river": PhaseType.RIVER,
}

_RAISING = (ActionType.BET, ActionType.RAISE, ActionType.ALLIN)


def load_phase(data: Mapping[str, Any]) -> PhaseType:
    """Read the phase name of a JSON game state."""
    try:
        name = data["phase"]
    except (KeyError, TypeError) as exc:
        raise SchemaError("phase missing") from exc
    try:
        return _PHASE_NAMES[name]
    except (KeyError, TypeError) as exc:
        raise ValueError(f"phase not found: {name!r}") from exc


def _no_action() -> Action:
    return Action(ActionType.NONE, to_bb(0))


@dataclass
class Context:
    """Pot, bets, seat indices, phase and players of a hand in progress."""

    players: list[Player]
    config: ContextConfig
    pot: Decimal = Decimal(0)
    highest_bet: Decimal = Decimal(0)
    index_bot: int = 0
    index_utg: int = 0
    index_button: int = 0
    index_active: int = 0
    betting_round: int = 0
    phase: PhaseType = PhaseType.PREFLOP
    last_action: Action = field(default_factory=_no_action)

    def __post_init__(self) -> None:
        self.pot = to_bb(self.pot)
        self.highest_bet = to_bb(self.highest_bet)
        self.phase = PhaseType(self.phase)
        self.players = list(self.players)

    @classmethod
    def from_json(cls, data: Mapping[str, Any], config: ContextConfig) -> "Context":
        """Load a game state; the bot's hand list is fixed to the configured hand."""
        phase = load_phase(data)
        try:
            players = [Player.from_json(entry) for entry in data["player"]]
            index_bot = int(data["index_bot"])
            context = cls(
                players=players,
                config=config,
                pot=to_bb(float(data["pot"])),
                highest_bet=to_bb(float(data["highest_bet"])),
                index_bot=index_bot,
                index_utg=int(data["index_utg"]),
                index_button=int(data["index_button"]),
                index_active=index_bot,
                betting_round=int(data["betting_round"]),
                phase=phase,
            )
            context.bot_player().handlist = config.bot_hand
        except (IndexError, KeyError, TypeError, ValueError) as exc:
            raise SchemaError(f"invalid context: {exc}") from exc
        return context

    def copy(self) -> "Context":
        """An independent copy of the state; the configuration is shared."""
        return Context(
            players=[p.copy() for p in self.players],
            config=self.config,
            pot=self.pot,
            highest_bet=self.highest_bet,
            index_bot=self.index_bot,
            index_utg=self.index_utg,
            index_button=self.index_button,
            index_active=self.index_active,
            betting_round=self.betting_round,
            phase=self.phase,
            last_action=self.last_action,
        )

    def transition(self, action: Action) -> "Context":
        """The state after the active player takes ``action``."""
        ncontext = self.copy()
        if ncontext.is_terminal():
            raise RuntimeError("Terminal context can't transition")

        ncontext.last_action = action
        bankroll = self.active_player().bankroll
        mover = ncontext.active_player()
        amount = to_bb(action.amount)

        if action.action is ActionType.FOLD:
            mover.set_inactive()
        elif action.action is ActionType.CALL:
            if mover.make_investment(amount, self.phase):
                ncontext.pot += amount
            else:
                ncontext.pot += bankroll
                mover.invested[self.phase] += bankroll
                mover.bankroll = to_bb(0)
            if bankroll <= amount:
                mover.set_allin()
        elif action.action in _RAISING:
            if mover.make_investment(amount, self.phase):
                ncontext.pot += amount
                ncontext.highest_bet = mover.invested[self.phase]
            else:
                ncontext.pot += bankroll
                mover.invested[self.phase] += bankroll
                ncontext.highest_bet = max(
                    ncontext.highest_bet, mover.invested[self.phase]
                )
                mover.bankroll = to_bb(0)
            if bankroll <= amount:
                mover.set_allin()
            ncontext.index_utg = self.index_active
            ncontext.betting_round += 1

        mover.action_sequence.append(action, ncontext.phase, self.betting_round)

        if ncontext.is_last_to_act():
            ncontext.transition_phase()
        else:
            if not ncontext.is_utg_index_reachable():
                ncontext.index_utg = ncontext.next_to_act()
            ncontext.index_active = ncontext.next_to_act()
        return ncontext

    def transitions(self) -> list["Context"]:
        """One successor state for each available action, in order."""
        return [self.transition(action) for action in self.available_actions()]

    def is_utg_index_reachable(self) -> bool:
        return self.players[self.index_utg].is_active()

    def is_last_to_act(self) -> bool:
        nxt = self.next_to_act()
        return nxt == self.index_utg or nxt == -1

    def _to_call(self) -> Decimal:
        active = self.players[self.index_active]
        to_call = self.highest_bet - active.invested[self.phase]
        return to_call if active.bankroll > to_call else active.bankroll

    def enum_available_actions(self) -> list[ActionType]:
        """The kinds of action open to the active player."""
        if self.phase is PhaseType.SHOWDOWN:
            return []
        bankroll = self.players[self.index_active].bankroll
        to_call = self._to_call()
        zero = to_bb(0)

        actions = [ActionType.FOLD if to_call > zero else ActionType.CHECK]
        if to_call > zero:
            actions.append(ActionType.CALL)
        if self.betting_round < self.config.betting_rounds and to_call < bankroll:
            actions.append(ActionType.RAISE)
        return actions

    def available_actions(self) -> list[Action]:
        """The concrete actions, with amounts, open to the active player."""
        active = self.players[self.index_active]
        invested = active.invested[self.phase]
        all_in = active.bankroll + invested
        to_call = self._to_call()
        actions: list[Action] = []

        for kind in self.enum_available_actions():
            if kind in (ActionType.FOLD, ActionType.CHECK):
                actions.append(Action(kind, to_bb(0)))
            elif kind is ActionType.CALL:
                actions.append(Action(kind, to_call))
            elif kind in _RAISING:
                if self.index_active == self.index_bot:
                    sizes = (
                        self.config.raise_sizes if self.has_bet() else self.config.bet_sizes
                    )
                    for size in sizes:
                        amount = self.bet_raise_amount(size)
                        if amount - invested >= active.bankroll:
                            actions.append(Action(ActionType.RAISE, all_in))
                            return actions
                        actions.append(Action(ActionType.RAISE, amount))
                else:
                    amount = self.bet_raise_amount(2 if self.has_bet() else 0.6)
                    if amount - invested >= active.bankroll:
                        actions.append(Action(ActionType.RAISE, all_in))
                    else:
                        actions.append(Action(ActionType.RAISE, amount))
        return actions

    def transition_phase(self) -> None:
        """Move to the next phase, or straight to showdown if nobody can act."""
        if self.nb_player_active() < 2:
            self.phase = PhaseType.SHOWDOWN
        else:
            self.phase = PhaseType(self.phase + 1)

        self.highest_bet = to_bb(0)
        self.betting_round = 0
        self.index_utg = self.next_utg()
        self.index_active = self.index_utg

        if self.index_utg == -1 and self.phase is not PhaseType.SHOWDOWN:
            self.transition_phase()

    def bet_raise_amount(self, factor: float) -> Decimal:
        """``factor`` times the highest bet if there is one, else times the pot."""
        base = self.highest_bet if self.has_bet() else self.pot
        return to_bb(base * to_bb(factor))

    def has_bet(self) -> bool:
        return self.highest_bet != to_bb(0)

    def is_terminal(self) -> bool:
        if self.phase is PhaseType.SHOWDOWN:
            return True
        active_count = self.nb_player_active()
        if active_count < 2 and self.index_active == -1:
            return True
        if (
            active_count == 1
            and self.last_active_player().invested[self.phase] == self.highest_bet
        ):
            return True
        return self.players[self.index_bot].is_inactive()

    def last_active_player(self) -> Player:
        """The first active player in seat order."""
        for player in self.players:
            if player.is_active():
                return player
        raise RuntimeError("last active player not found.")

    def nb_player_active(self) -> int:
        return sum(1 for p in self.players if p.is_active())

    def nb_player_allin(self) -> int:
        return sum(1 for p in self.players if p.is_allin())

    def nb_player_inactive(self) -> int:
        return sum(1 for p in self.players if p.is_inactive())

    def nb_player_not_inactive(self) -> int:
        return sum(1 for p in self.players if not p.is_inactive())

    def bot_player(self) -> Player:
        return self.players[self.index_bot]

    def active_player(self) -> Player:
        return self.players[self.index_active]

    def next_utg(self) -> int:
        """The first active seat after the button, or -1."""
        count = len(self.players)
        for offset in range(1, count):
            nxt = (self.index_button + offset) % count
            if nxt != self.index_button and self.players[nxt].is_active():
                return nxt
        return -1

    def next_to_act(self) -> int:
        """The next active seat that has not overbet the highest bet, or -1."""
        count = len(self.players)
        for offset in range(1, count):
            nxt = (self.index_active + offset) % count
            player = self.players[nxt]
            if (
                player.is_active()
                and player.invested[self.phase] <= self.highest_bet
                and nxt != self.index_active
            ):
                return nxt
        return -1