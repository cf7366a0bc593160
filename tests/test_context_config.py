import pytest

from freedompoker.actions import SchemaError
from freedompoker.context_config import ContextConfig


def _data():
    return {
        "bot_hand": [51, 49],
        "betting_rounds": 5,
        "rake": 0.05,
        "board": [22, 1, 31],
        "bet_sizes": [0.5, 1],
        "raise_sizes": [2, 3],
    }


def test_from_json_reads_all_fields():
    config = ContextConfig.from_json(_data())
    assert config.bot_hand == (51, 49)
    assert config.betting_rounds == 5
    assert config.rake_factor == 0.05
    assert config.board == [22, 1, 31]
    assert config.bet_sizes == [0.5, 1.0]
    assert config.raise_sizes == [2.0, 3.0]


def test_default_rake_and_lists():
    config = ContextConfig("AhAs", 5)
    assert config.rake_factor == 0.0
    assert config.board == []
    assert config.bet_sizes == []
    assert config.raise_sizes == []


def test_constructor_keeps_values():
    config = ContextConfig("AhAs", 2, [], [1], [3])
    assert config.bot_hand == "AhAs"
    assert config.betting_rounds == 2
    assert config.bet_sizes == [1]
    assert config.raise_sizes == [3]


@pytest.mark.parametrize(
    "key", ["bot_hand", "betting_rounds", "rake", "board", "bet_sizes", "raise_sizes"]
)
def test_from_json_missing_key(key):
    data = _data()
    del data[key]
    with pytest.raises(SchemaError):
        ContextConfig.from_json(data)


def test_from_json_short_hand():
    data = _data()
    data["bot_hand"] = [51]
    with pytest.raises(SchemaError):
        ContextConfig.from_json(data)