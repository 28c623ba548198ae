"""Tests for record_manager.config."""

import pytest


def test_load_config_required_vars(monkeypatch):
    from record_manager.config import load_config

    monkeypatch.setenv("AZURE_SUBSCRIPTION_ID", "sub-123")

    cfg = load_config()
    assert cfg.subscription_id == "sub-123"


def test_load_config_defaults(monkeypatch):
    from record_manager.config import load_config

    monkeypatch.setenv("AZURE_SUBSCRIPTION_ID", "sub-123")
    for name in ("IMPORT_GUARD", "CREATE_UPDATE_TIMEOUT_MINUTES", "READ_TIMEOUT_MINUTES", "DELETE_TIMEOUT_MINUTES"):
        monkeypatch.delenv(name, raising=False)

    cfg = load_config()
    assert cfg.import_guard is True
    assert cfg.timeouts.create_update == 30 * 60
    assert cfg.timeouts.read == 5 * 60
    assert cfg.timeouts.delete == 30 * 60


def test_load_config_custom_optionals(monkeypatch):
    from record_manager.config import load_config

    monkeypatch.setenv("AZURE_SUBSCRIPTION_ID", "sub-123")
    monkeypatch.setenv("IMPORT_GUARD", "false")
    monkeypatch.setenv("CREATE_UPDATE_TIMEOUT_MINUTES", "10")
    monkeypatch.setenv("READ_TIMEOUT_MINUTES", "2")
    monkeypatch.setenv("DELETE_TIMEOUT_MINUTES", "15")

    cfg = load_config()
    assert cfg.import_guard is False
    assert cfg.timeouts.create_update == 600
    assert cfg.timeouts.read == 120
    assert cfg.timeouts.delete == 900


def test_load_config_missing_subscription(monkeypatch):
    from record_manager.config import load_config

    monkeypatch.delenv("AZURE_SUBSCRIPTION_ID", raising=False)

    with pytest.raises(ValueError, match="AZURE_SUBSCRIPTION_ID"):
        load_config()


@pytest.mark.parametrize("raw", ["1", "TRUE", "yes", "on"])
def test_load_config_import_guard_truthy(monkeypatch, raw):
    from record_manager.config import load_config

    monkeypatch.setenv("AZURE_SUBSCRIPTION_ID", "sub-123")
    monkeypatch.setenv("IMPORT_GUARD", raw)

    assert load_config().import_guard is True


def test_load_config_invalid_import_guard(monkeypatch):
    from record_manager.config import load_config

    monkeypatch.setenv("AZURE_SUBSCRIPTION_ID", "sub-123")
    monkeypatch.setenv("IMPORT_GUARD", "maybe")

    with pytest.raises(ValueError, match="IMPORT_GUARD must be a boolean"):
        load_config()


def test_load_config_invalid_timeout(monkeypatch):
    from record_manager.config import load_config

    monkeypatch.setenv("AZURE_SUBSCRIPTION_ID", "sub-123")
    monkeypatch.setenv("READ_TIMEOUT_MINUTES", "not-a-number")

    with pytest.raises(ValueError, match="READ_TIMEOUT_MINUTES must be an integer"):
        load_config()


def test_load_config_zero_timeout(monkeypatch):
    from record_manager.config import load_config

    monkeypatch.setenv("AZURE_SUBSCRIPTION_ID", "sub-123")
    monkeypatch.setenv("DELETE_TIMEOUT_MINUTES", "0")

    with pytest.raises(ValueError, match="DELETE_TIMEOUT_MINUTES must be a positive integer"):
        load_config()


def test_load_config_managed_identity(monkeypatch):
    from record_manager.config import load_config

    monkeypatch.setenv("AZURE_SUBSCRIPTION_ID", "sub-123")
    monkeypatch.setenv("AZURE_MANAGED_IDENTITY_CLIENT_ID", "mi-client-1")

    assert load_config().managed_identity_client_id == "mi-client-1"


def test_load_config_managed_identity_default_none(monkeypatch):
    from record_manager.config import load_config

    monkeypatch.setenv("AZURE_SUBSCRIPTION_ID", "sub-123")
    monkeypatch.delenv("AZURE_MANAGED_IDENTITY_CLIENT_ID", raising=False)

    assert load_config().managed_identity_client_id is None
