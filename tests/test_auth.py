"""Tests for record_manager.auth."""

from unittest.mock import patch


@patch("record_manager.auth.DefaultAzureCredential")
def test_get_credential_is_cached(mock_cred_cls):
    from record_manager.auth import get_credential

    first = get_credential()
    second = get_credential()

    mock_cred_cls.assert_called_once_with()
    assert first is second is mock_cred_cls.return_value


@patch("record_manager.auth.DefaultAzureCredential")
def test_get_credential_selects_user_assigned_identity(mock_cred_cls):
    from record_manager.auth import get_credential

    get_credential("mi-client-1")
    get_credential("mi-client-1")

    mock_cred_cls.assert_called_once_with(managed_identity_client_id="mi-client-1")


@patch("record_manager.auth.DefaultAzureCredential")
def test_get_credential_rebuilds_for_other_identity(mock_cred_cls):
    from record_manager.auth import get_credential

    get_credential()
    get_credential("mi-client-2")

    assert mock_cred_cls.call_count == 2
    assert mock_cred_cls.call_args.kwargs == {"managed_identity_client_id": "mi-client-2"}
