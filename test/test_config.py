from ant_farm import Config


def test_defaults():
    config = Config()
    assert config.selection_mode == "greedy"
    assert config.ant_prefix == "L"
    assert config.max_ants == 10000


def test_env_overrides_are_coerced(monkeypatch):
    monkeypatch.setenv("SELECTION_MODE", "ilp")
    monkeypatch.setenv("MAX_ANTS", "50")
    monkeypatch.setenv("EXPORT_ARTIFACTS", "yes")
    monkeypatch.setenv("ECHO_INPUT", "0")
    config = Config().with_env_overrides()
    assert config.selection_mode == "ilp"
    assert config.max_ants == 50
    assert config.export_artifacts is True
    assert config.echo_input is False


def test_to_dict_round_trips():
    config = Config(ant_prefix="Z")
    assert Config(**config.to_dict()) == config
