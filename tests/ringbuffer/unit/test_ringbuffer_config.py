from __future__ import annotations

from ringbuffer.config import RingBufferConfig, load_ringbuffer_config, resolve_log_level_name


def _clear_env(monkeypatch) -> None:
    for name in (
        "RINGBUFFER_DEFAULT_CAPACITY",
        "RINGBUFFER_TRACE",
        "RINGBUFFER_LOG_LEVEL",
        "RINGBUFFER_LOG_FORMAT",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


def test_ringbuffer_config_defaults(monkeypatch) -> None:
    _clear_env(monkeypatch)

    assert load_ringbuffer_config() == RingBufferConfig()


def test_ringbuffer_config_parses_environment(monkeypatch) -> None:
    _clear_env(monkeypatch)
    monkeypatch.setenv("RINGBUFFER_DEFAULT_CAPACITY", "64")
    monkeypatch.setenv("RINGBUFFER_TRACE", "yes")
    monkeypatch.setenv("RINGBUFFER_LOG_LEVEL", "debug")
    monkeypatch.setenv("RINGBUFFER_LOG_FORMAT", "JSON")

    cfg = load_ringbuffer_config()
    assert cfg.default_capacity == 64
    assert cfg.trace_enabled is True
    assert cfg.log_level == "DEBUG"
    assert cfg.log_format == "json"


def test_ringbuffer_config_capacity_is_clamped_and_invalid_values_fall_back(monkeypatch) -> None:
    _clear_env(monkeypatch)
    monkeypatch.setenv("RINGBUFFER_DEFAULT_CAPACITY", "0")
    assert load_ringbuffer_config().default_capacity == 1

    monkeypatch.setenv("RINGBUFFER_DEFAULT_CAPACITY", "lots")
    monkeypatch.setenv("RINGBUFFER_LOG_FORMAT", "xml")
    cfg = load_ringbuffer_config()
    assert cfg.default_capacity == 1024
    assert cfg.log_format == "text"


def test_resolve_log_level_prefers_package_variable(monkeypatch) -> None:
    _clear_env(monkeypatch)
    monkeypatch.setenv("LOG_LEVEL", "warning")
    assert resolve_log_level_name() == "WARNING"

    monkeypatch.setenv("RINGBUFFER_LOG_LEVEL", "error")
    assert resolve_log_level_name() == "ERROR"
