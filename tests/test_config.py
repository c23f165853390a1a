from tictactoe_vs_ai import config


def test_read_int_default_when_missing(monkeypatch):
    monkeypatch.delenv("TTT_TEST_DELAY", raising=False)
    assert config._read_int("TTT_TEST_DELAY", 350) == 350


def test_read_int_parses_value(monkeypatch):
    monkeypatch.setenv("TTT_TEST_DELAY", "120")
    assert config._read_int("TTT_TEST_DELAY", 350) == 120


def test_read_int_ignores_junk(monkeypatch, caplog):
    monkeypatch.setenv("TTT_TEST_DELAY", "soon")
    assert config._read_int("TTT_TEST_DELAY", 350) == 350
    assert "not an integer" in caplog.text
    monkeypatch.setenv("TTT_TEST_DELAY", "-5")
    assert config._read_int("TTT_TEST_DELAY", 350) == 350


def test_board_constants():
    assert config.GRID_LENGTH == config.MAX_MOVES == 9


def test_read_choice_falls_back_on_unknown_name(monkeypatch, caplog):
    monkeypatch.setenv("TTT_TEST_STRATEGY", "grandmaster")
    value = config._read_choice("TTT_TEST_STRATEGY", config.STRATEGY_NAMES, "minimax")
    assert value == "minimax"
    assert "expected one of" in caplog.text


def test_read_choice_normalises_known_name(monkeypatch):
    monkeypatch.setenv("TTT_TEST_STRATEGY", " Easy ")
    assert config._read_choice("TTT_TEST_STRATEGY", config.STRATEGY_NAMES, "minimax") == "easy"
    monkeypatch.delenv("TTT_TEST_STRATEGY")
    assert config._read_choice("TTT_TEST_STRATEGY", config.STRATEGY_NAMES, "minimax") == "minimax"


def test_strategy_names_match_registry():
    from tictactoe_vs_ai.strategy import STRATEGIES
    assert set(config.STRATEGY_NAMES) == set(STRATEGIES)
    assert config.STRATEGY in STRATEGIES
    assert config.LOG_LEVEL.lower() in config.LOG_LEVEL_NAMES
