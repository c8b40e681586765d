import logging

import pytest

from algraph import (
    load_config,
    get_instance_for,
    eq_strict,
    AlgraphConfig,
    TraversalConfig,
    SimplifyConfig,
    ConfigError,
)


def test_defaults(monkeypatch):
    monkeypatch.delenv("ALGRAPH_TRAVERSAL_STRATEGY", raising=False)
    monkeypatch.delenv("ALGRAPH_SIMPLIFY_MAX_SIZE", raising=False)

    config = load_config()

    assert config == AlgraphConfig()
    assert config.traversal.strategy == "iterative"
    assert config.simplify.max_size == 0


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("ALGRAPH_TRAVERSAL_STRATEGY", "recursive")
    monkeypatch.setenv("ALGRAPH_SIMPLIFY_MAX_SIZE", "64")

    config = load_config()

    assert config.traversal.strategy == "recursive"
    assert config.simplify.max_size == 64


def test_settings_file(tmp_path, monkeypatch):
    monkeypatch.delenv("ALGRAPH_TRAVERSAL_STRATEGY", raising=False)
    monkeypatch.delenv("ALGRAPH_SIMPLIFY_MAX_SIZE", raising=False)
    path = tmp_path / "algraph.toml"
    path.write_text('TRAVERSAL_STRATEGY = "recursive"\nSIMPLIFY_MAX_SIZE = 8\n')

    config = load_config([str(path)])

    assert config.traversal.strategy == "recursive"
    assert config.simplify.max_size == 8


def test_invalid_environment_value(monkeypatch):
    monkeypatch.setenv("ALGRAPH_TRAVERSAL_STRATEGY", "sideways")

    with pytest.raises(ConfigError):
        load_config()


def test_invalid_dataclass_values():
    with pytest.raises(ConfigError):
        TraversalConfig(strategy="breadth-first")
    with pytest.raises(ValueError):
        SimplifyConfig(max_size=-1)
    with pytest.raises(ConfigError):
        SimplifyConfig(max_size=1.5)
    with pytest.raises(ConfigError):
        SimplifyConfig(max_size="8")


def test_load_logs_effective_config(monkeypatch, caplog):
    monkeypatch.delenv("ALGRAPH_TRAVERSAL_STRATEGY", raising=False)

    with caplog.at_level(logging.INFO, logger="algraph.config"):
        load_config()

    assert "strategy=iterative" in caplog.text


def test_instance_defaults_to_default_config():
    instance = get_instance_for(eq_strict)
    assert instance.config == AlgraphConfig()


@pytest.mark.parametrize("raw", ["lots", "1.5", "true"])
def test_invalid_environment_max_size(monkeypatch, raw):
    monkeypatch.delenv("ALGRAPH_TRAVERSAL_STRATEGY", raising=False)
    monkeypatch.setenv("ALGRAPH_SIMPLIFY_MAX_SIZE", raw)

    with pytest.raises(ConfigError, match="max_size"):
        load_config()
