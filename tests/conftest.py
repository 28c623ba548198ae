"""Shared test fixtures for azure-dns-aaaa-record-manager."""

import record_manager.auth as _auth


def pytest_runtest_setup(item):
    """Reset module-level caches between tests."""
    _auth._credential = None
    _auth._credential_client_id = None
