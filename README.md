# freedompoker

Building blocks for a no-limit hold'em bot. The package provides a game-state
model that lists the legal actions and plays them out. It groups hands into
buckets by equity. It also has selectors that pick a move from the evaluated
children of a search-tree node.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `freedompoker.actions`
  - Types: `ActionType`, `PhaseType` (an `IntEnum` from `PREFLOP` to
    `SHOWDOWN`), `StatusType`, `Action` (a frozen action type and amount) and
    `ActionSequence`. An `ActionSequence` is an ordered list of
    `(action, phase, betting_round)` entries.
  - `to_bb(value)` turns a number into a `Decimal` of big blinds, rounded to
    two places.
  - `resolve_action(code)` maps the letters `X`, `F`, `C`, `R` and `B` to
    check, fold, call, raise and bet. Any other code gives `ActionType.NONE`.
  - `parse_action_sequence(data)` reads four per-phase lists of
    `[code, amount, betting_round]`.
  - Malformed data raises `SchemaError`.
- `freedompoker.player`: `Player` holds the bankroll, the investment per phase,
  the hand list, the model name, the status and the action sequence.
  - `make_investment(amount, phase)` returns `False` and changes nothing when
    the bankroll is too small.
  - `total_investment()`, the status helpers and `copy()`.
  - `Player.from_json(data)` builds a player from a JSON object.
  - `load_status(data)` reads the status from a JSON object.
- `freedompoker.context_config`: `ContextConfig` holds the settings fixed for a
  whole hand: the bot's hand, the maximum number of betting rounds, the board,
  the bet and raise sizes, and the rake factor. It also has `from_json`.
- `freedompoker.context`: `Context` is the game state.
  - `enum_available_actions()` gives the kinds of action open to the active
    player.
  - `available_actions()` gives the concrete actions with their amounts. When
    the bot is active, raise amounts come from the configured bet and raise
    sizes. For opponents a single raise is offered: 0.6 times the pot, or 2
    times the highest bet.
  - `transition(action)` returns a new state, and `transitions()` gives one
    new state per available action.
  - `transition_phase()` advances the phase. It goes straight to showdown
    when nobody is left to act.
  - Queries: `is_terminal()`, `next_to_act()`, `next_utg()` and the
    player-counting methods.
  - `Context.from_json(data, config)` loads a state. `load_phase(data)` reads
    the phase name.
  - Transitioning a terminal state raises `RuntimeError`. An unknown phase
    name raises `ValueError`.
- `freedompoker.buckets`:
  - `BucketHand` wraps a hand object with its equity. Hands compare by equity.
  - `BucketCollection` is a list of buckets. It supports indexing, `len()`,
    iteration, range extraction, hand counting and reversal.
  - `BalancedBucketizer` fills buckets in order with equally many hands.
  - `ExponentialBucketizer` sizes buckets in proportion to `1/i**2`, so the
    buckets at the strong end of the returned collection are the smallest.
- `freedompoker.distributions`: `GaussianDistribution(mean, std_dev)` and
  `ExponentialDistribution(lam)`. Both are density functions that can be
  called directly.
- `freedompoker.selectors`:
  - `split_by_amount(children)` separates children whose last action cost
    chips from those whose last action was free.
  - `BetamtEVRatioSelector(threshold)` takes the costly child with the best
    EV/amount ratio if that ratio reaches the threshold.
  - `FinalMoveSelector(ev_threshold, ...)` tries costly children from the
    highest EV down and takes the first whose ratio reaches `ev_threshold`.
  - If no costly child qualifies, both selectors return the last free child.
    They raise `LookupError` if there is no free child.
  - A node is any object with a `children` sequence, a `context` whose
    `last_action.amount` gives the cost, and an `ev()` method.

## Example

```python
from freedompoker.actions import PhaseType, StatusType, to_bb
from freedompoker.player import Player
from freedompoker.context_config import ContextConfig
from freedompoker.context import Context

config = ContextConfig(
    bot_hand=("Ah", "As"),
    betting_rounds=5,
    bet_sizes=[0.5, 1],
    raise_sizes=[2, 3],
)
players = [
    Player(bankroll=to_bb(10), status=StatusType.ACTIVE),
    Player(bankroll=to_bb(10), status=StatusType.ACTIVE),
]
context = Context(
    players=players,
    config=config,
    pot=to_bb(2),
    phase=PhaseType.PREFLOP,
)

for action in context.available_actions():
    print(action.action, action.amount)   # check 0.00, raise 1.00, raise 2.00

after_raise = context.transition(context.available_actions()[1])
print(after_raise.pot, after_raise.highest_bet)   # 3.00 1.00
```

Amounts are measured in big blinds and held as `Decimal` values rounded to
hundredths. Comparisons between stacks and bets are therefore exact.

## What the package does not do

The package has no equity calculator and no hand evaluator. It also has no
range predictor, no opponent models and no search-tree implementation.
Equities for `BucketHand` and node EVs for the selectors must be supplied by
the caller. `FinalMoveSelector` stores its big-raise settings but does not
change the amount of the move it returns. There is no command-line program.