import importlib

import catalog_gateway.config as config


def test_defaults(monkeypatch):
    for var in ("CATALOG_ADMIN_BASE_URL", "CATALOG_ADMIN_TIMEOUT", "CATALOG_PORT", "CATALOG_GATEWAY_URL"):
        monkeypatch.delenv(var, raising=False)
    importlib.reload(config)

    assert config.ADMIN_BASE_URL == "http://admin"
    assert config.ADMIN_TIMEOUT == 5.0
    assert config.PORT == 8080
    assert config.GATEWAY_URL == "http://localhost:8080"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("CATALOG_ADMIN_BASE_URL", "http://admin.internal:9000")
    monkeypatch.setenv("CATALOG_ADMIN_TIMEOUT", "2.5")
    monkeypatch.setenv("CATALOG_PORT", "9090")
    monkeypatch.delenv("CATALOG_GATEWAY_URL", raising=False)
    importlib.reload(config)

    assert config.ADMIN_BASE_URL == "http://admin.internal:9000"
    assert config.ADMIN_TIMEOUT == 2.5
    assert config.GATEWAY_URL == "http://localhost:9090"

    monkeypatch.undo()
    importlib.reload(config)
