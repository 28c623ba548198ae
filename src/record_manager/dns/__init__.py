"""Reconciler factory — build a configured AAAA record reconciler."""

from __future__ import annotations

from record_manager.auth import get_credential as _get_credential
from record_manager.config import AppConfig
from record_manager.dns.aaaa import AaaaRecordReconciler
from record_manager.dns.base import RecordReconciler

__all__ = ["AaaaRecordReconciler", "RecordReconciler", "get_record_reconciler"]


def get_record_reconciler(config: AppConfig) -> AaaaRecordReconciler:
    """Instantiate an AAAA record reconciler for the configured subscription.

    Args:
        config: Application configuration.

    Returns:
        A configured AaaaRecordReconciler, usable as a context manager.
    """
    if not config.subscription_id:
        raise ValueError("AZURE_SUBSCRIPTION_ID is required")
    return AaaaRecordReconciler(
        credential=_get_credential(config.managed_identity_client_id),
        subscription_id=config.subscription_id,
        timeouts=config.timeouts,
    )
