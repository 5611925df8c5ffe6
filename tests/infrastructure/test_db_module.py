"""Tests for the infrastructure.db module."""

import pytest

from src.infrastructure import db as db_module


def test_get_env_var_reads_environment(monkeypatch):
    """_get_env_var should load .env and return the requested value."""
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setenv("BALANCE_DB_URL", "sqlite:///balance.db")

    assert db_module._get_env_var("BALANCE_DB_URL") == "sqlite:///balance.db"


def test_get_env_var_raises_when_missing(monkeypatch):
    """Missing env vars should raise a RuntimeError naming the variable."""
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.delenv("BALANCE_DB_URL", raising=False)

    with pytest.raises(RuntimeError, match="BALANCE_DB_URL"):
        db_module._get_env_var("BALANCE_DB_URL")


def test_create_engine_pools_server_databases(monkeypatch):
    """Server databases get a small QueuePool with health checks."""
    captured = {}

    def fake_create_engine(db_url, **kwargs):
        captured["db_url"] = db_url
        captured["kwargs"] = kwargs
        return "engine"

    monkeypatch.setattr(db_module, "create_engine", fake_create_engine)

    engine = db_module._create_engine("postgresql://balance")

    assert engine == "engine"
    assert captured["db_url"] == "postgresql://balance"
    assert captured["kwargs"]["poolclass"] is db_module.QueuePool
    assert captured["kwargs"]["pool_size"] == 5
    assert captured["kwargs"]["max_overflow"] == 5
    assert captured["kwargs"]["pool_pre_ping"] is True
    assert captured["kwargs"]["future"] is True
    assert "connect_args" not in captured["kwargs"]


def test_create_engine_shares_sqlite_connections_across_threads(
    monkeypatch,
):
    """SQLite snapshot files can be read from Streamlit worker threads."""
    captured = {}

    def fake_create_engine(db_url, **kwargs):
        captured.update(kwargs)
        return "engine"

    monkeypatch.setattr(db_module, "create_engine", fake_create_engine)

    db_module._create_engine("sqlite:///balance.db")

    assert captured["connect_args"] == {"check_same_thread": False}
    assert "poolclass" not in captured
    assert captured["future"] is True


def test_get_env_var_rejects_blank_values(monkeypatch):
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setenv("BALANCE_DB_URL", "   ")

    with pytest.raises(RuntimeError, match="BALANCE_DB_URL"):
        db_module._get_env_var(db_module.BALANCE_DB_URL_VAR)


def test_get_balance_engine_caches_engine(monkeypatch):
    """get_balance_engine should memoize the created engine."""
    monkeypatch.setattr(db_module, "_balance_engine", None)
    created = []

    def fake_create_engine(url):
        created.append(url)
        return f"engine:{url}"

    monkeypatch.setattr(db_module, "_create_engine", fake_create_engine)
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setenv("BALANCE_DB_URL", "postgresql://balance")

    engine_one = db_module.get_balance_engine()
    engine_two = db_module.get_balance_engine()

    assert engine_one is engine_two
    assert engine_one == "engine:postgresql://balance"
    assert created == ["postgresql://balance"]


def test_adapter_returns_underlying_engine(monkeypatch):
    """SqlAlchemyDatabaseEngineAdapter should proxy the global helper."""
    monkeypatch.setattr(
        db_module,
        "get_balance_engine",
        lambda: "balance_engine",
    )

    adapter = db_module.SqlAlchemyDatabaseEngineAdapter()

    assert adapter.get_balance_engine() == "balance_engine"
