import pytest

from treehash import config


def test_defaults(monkeypatch):
    for name in (
        "TREEHASH_ALGORITHM",
        "TREEHASH_ENCODING",
        "TREEHASH_MAX_WORKERS",
        "TREEHASH_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)

    assert config.default_algorithm() == "sha256"
    assert config.default_encoding() is None
    assert config.default_max_workers() is None
    assert config.default_log_level() == "WARNING"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("TREEHASH_ALGORITHM", "sha512")
    monkeypatch.setenv("TREEHASH_ENCODING", "utf-8")
    monkeypatch.setenv("TREEHASH_MAX_WORKERS", "4")
    monkeypatch.setenv("TREEHASH_LOG_LEVEL", "debug")

    assert config.default_algorithm() == "sha512"
    assert config.default_encoding() == "utf-8"
    assert config.default_max_workers() == 4
    assert config.default_log_level() == "DEBUG"


@pytest.mark.parametrize("raw", ["many", "0", "-2"])
def test_invalid_max_workers(monkeypatch, raw):
    monkeypatch.setenv("TREEHASH_MAX_WORKERS", raw)
    with pytest.raises(ValueError):
        config.default_max_workers()


def test_resolve_encoding(monkeypatch):
    monkeypatch.setenv("TREEHASH_ENCODING", "utf-8")

    assert config.resolve_encoding(None) == "utf-8"
    assert config.resolve_encoding("raw") is None
    assert config.resolve_encoding("RAW") is None
    assert config.resolve_encoding("latin-1") == "latin-1"


def test_raw_in_environment_means_raw_bytes(monkeypatch):
    monkeypatch.setenv("TREEHASH_ENCODING", "raw")
    assert config.default_encoding() is None
