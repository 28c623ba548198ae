"""Azure credential for the DNS management client."""

from __future__ import annotations

from azure.identity import DefaultAzureCredential

_credential: DefaultAzureCredential | None = None
_credential_client_id: str | None = None


def get_credential(managed_identity_client_id: str | None = None) -> DefaultAzureCredential:
    """Return a cached DefaultAzureCredential.

    A user-assigned managed identity is selected by its client ID; the cached
    credential is rebuilt if a different identity is requested.
    """
    global _credential, _credential_client_id
    if _credential is None or managed_identity_client_id != _credential_client_id:
        if managed_identity_client_id:
            _credential = DefaultAzureCredential(managed_identity_client_id=managed_identity_client_id)
        else:
            _credential = DefaultAzureCredential()
        _credential_client_id = managed_identity_client_id
    return _credential
