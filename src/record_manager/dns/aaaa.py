"""Azure DNS AAAA record reconciler — create/update, read and delete via azure-mgmt-dns."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import UTC, datetime, timedelta

from azure.core.exceptions import AzureError, ResourceNotFoundError
from azure.mgmt.dns import DnsManagementClient
from azure.mgmt.dns.models import AaaaRecord, RecordSet, SubResource

from record_manager.config import Timeouts
from record_manager.dns.base import RecordReconciler
from record_manager.errors import (
    MissingRecordIdError,
    RecordAlreadyExistsError,
    RecordDeleteStatusError,
    RecordNotFoundError,
    RecordValidationError,
    RemoteCallError,
)
from record_manager.models import AaaaRecordState, replacement_fields
from record_manager.resource_id import parse_record_id
from record_manager.tags import expand_tags, flatten_and_set

logger = logging.getLogger(__name__)

_RECORD_TYPE = "AAAA"


def expand_aaaa_records(records: Iterable[str]) -> list[AaaaRecord]:
    """One AaaaRecord per address; ordering follows iteration order of ``records``."""
    return [AaaaRecord(ipv6_address=address) for address in records]


def flatten_aaaa_records(aaaa_records: Iterable[AaaaRecord]) -> frozenset[str]:
    return frozenset(r.ipv6_address for r in aaaa_records if r.ipv6_address)


def _status_code(pipeline_response, deserialized, response_headers) -> int:
    return pipeline_response.http_response.status_code


class _Deadline:
    """Absolute deadline shared by the calls of one lifecycle operation."""

    def __init__(self, seconds: int) -> None:
        self._expires = datetime.now(UTC) + timedelta(seconds=seconds)

    def remaining(self) -> float:
        return (self._expires - datetime.now(UTC)).total_seconds()


class AaaaRecordReconciler(RecordReconciler):
    """Converges AAAA record sets in Azure DNS zones with local state."""

    def __init__(
        self,
        credential,
        subscription_id: str,
        timeouts: Timeouts | None = None,
        _dns_client: DnsManagementClient | None = None,
    ) -> None:
        self._timeouts = timeouts or Timeouts()
        self._dns_client = _dns_client or DnsManagementClient(credential, subscription_id)

    def close(self) -> None:
        """Close the underlying management client."""
        self._dns_client.close()

    def _timeout(self, deadline: _Deadline, operation: str, name: str, zone_name: str, resource_group: str) -> float:
        remaining = deadline.remaining()
        if remaining <= 0:
            raise RemoteCallError(operation, name, zone_name, resource_group, "operation timed out")
        return remaining

    def _get(
        self,
        resource_group: str,
        zone_name: str,
        name: str,
        deadline: _Deadline,
        operation: str,
    ) -> RecordSet | None:
        """Fetch a record set. Returns None when Azure reports it does not exist."""
        timeout = self._timeout(deadline, operation, name, zone_name, resource_group)
        try:
            return self._dns_client.record_sets.get(
                resource_group_name=resource_group,
                zone_name=zone_name,
                relative_record_set_name=name,
                record_type=_RECORD_TYPE,
                timeout=timeout,
            )
        except ResourceNotFoundError:
            return None
        except AzureError as exc:
            raise RemoteCallError(operation, name, zone_name, resource_group, str(exc)) from exc

    def _build_record_set(self, state: AaaaRecordState) -> RecordSet:
        problems = state.validate()
        if problems:
            raise RecordValidationError("; ".join(problems), state.name, state.zone_name, state.resource_group)

        target_resource = SubResource(id=state.target_resource_id) if state.target_resource_id else SubResource()
        return RecordSet(
            ttl=state.ttl,
            metadata=expand_tags(state.tags),
            aaaa_records=[] if state.target_resource_id else expand_aaaa_records(state.records),
            target_resource=target_resource,
        )

    def _ensure_absent(self, state: AaaaRecordState, deadline: _Deadline) -> None:
        """Raise RecordAlreadyExistsError if a record set already exists at the key of ``state``."""
        existing = self._get(
            state.resource_group, state.zone_name, state.name, deadline, "checking for presence of existing record"
        )
        if existing is not None and existing.id:
            raise RecordAlreadyExistsError(existing.id, state.name, state.zone_name, state.resource_group)

    def create_or_update(self, state: AaaaRecordState, *, is_new: bool, import_guard: bool) -> None:
        deadline = _Deadline(self._timeouts.create_update)
        name, zone_name, resource_group = state.name, state.zone_name, state.resource_group
        parameters = self._build_record_set(state)

        if import_guard and is_new:
            self._ensure_absent(state, deadline)

        timeout = self._timeout(deadline, "creating/updating record", name, zone_name, resource_group)
        try:
            # No if_match / if_none_match so later updates can overwrite the record set.
            self._dns_client.record_sets.create_or_update(
                resource_group_name=resource_group,
                zone_name=zone_name,
                relative_record_set_name=name,
                record_type=_RECORD_TYPE,
                parameters=parameters,
                if_match=None,
                if_none_match=None,
                timeout=timeout,
            )
        except AzureError as exc:
            raise RemoteCallError("creating/updating record", name, zone_name, resource_group, str(exc)) from exc

        resp = self._get(resource_group, zone_name, name, deadline, "retrieving record")
        if resp is None:
            raise RemoteCallError(
                "retrieving record", name, zone_name, resource_group, "record set not found after create/update"
            )
        if not resp.id:
            raise MissingRecordIdError("Cannot read record ID after create/update", name, zone_name, resource_group)

        state.id = resp.id
        logger.info("Created/updated AAAA record %s.%s (%s)", name, zone_name, resource_group)

        self.read(state)

    def read(self, state: AaaaRecordState) -> None:
        deadline = _Deadline(self._timeouts.read)
        record_id = parse_record_id(state.id)

        resp = self._get(record_id.resource_group, record_id.zone_name, record_id.name, deadline, "reading record")
        if resp is None:
            logger.warning(
                "AAAA record %s.%s (%s) was not found — removing from state",
                record_id.name,
                record_id.zone_name,
                record_id.resource_group,
            )
            state.id = None
            return

        state.name = record_id.name
        state.resource_group = record_id.resource_group
        state.zone_name = record_id.zone_name
        state.ttl = resp.ttl
        state.fqdn = resp.fqdn
        state.target_resource_id = resp.target_resource.id if resp.target_resource else None

        # Alias records carry no address list; keep whatever the state already holds.
        if resp.aaaa_records is not None:
            state.records = flatten_aaaa_records(resp.aaaa_records)

        flatten_and_set(state, resp.metadata)

    def delete(self, state: AaaaRecordState) -> None:
        deadline = _Deadline(self._timeouts.delete)
        record_id = parse_record_id(state.id)
        name, zone_name, resource_group = record_id.name, record_id.zone_name, record_id.resource_group

        timeout = self._timeout(deadline, "deleting record", name, zone_name, resource_group)
        try:
            status = self._dns_client.record_sets.delete(
                resource_group_name=resource_group,
                zone_name=zone_name,
                relative_record_set_name=name,
                record_type=_RECORD_TYPE,
                if_match=None,
                timeout=timeout,
                cls=_status_code,
            )
        except AzureError as exc:
            raise RemoteCallError("deleting record", name, zone_name, resource_group, str(exc)) from exc

        if status != 200:
            raise RecordDeleteStatusError(status, name, zone_name, resource_group)

        state.id = None
        logger.info("Deleted AAAA record %s.%s (%s)", name, zone_name, resource_group)

    def import_record(self, record_id: str) -> AaaaRecordState:
        """Adopt an existing record set by ID and return its current state."""
        parsed = parse_record_id(record_id)
        state = AaaaRecordState(
            name=parsed.name,
            resource_group=parsed.resource_group,
            zone_name=parsed.zone_name,
            ttl=0,
            id=record_id,
        )
        self.read(state)
        if state.id is None:
            raise RecordNotFoundError(
                "Cannot import non-existent record", parsed.name, parsed.zone_name, parsed.resource_group
            )
        return state

    def apply(
        self,
        desired: AaaaRecordState,
        *,
        prior: AaaaRecordState | None = None,
        import_guard: bool = True,
    ) -> AaaaRecordState:
        """Converge ``desired`` given the previously stored state, replacing the record if needed.

        Returns ``desired``, refreshed from Azure.
        """
        if prior is None or prior.id is None:
            self.create_or_update(desired, is_new=True, import_guard=import_guard)
            return desired

        changed = replacement_fields(prior, desired)
        if changed:
            # Nothing is deleted until the replacement is known to be writable.
            self._build_record_set(desired)
            if import_guard:
                self._ensure_absent(desired, _Deadline(self._timeouts.create_update))

            self.read(prior)
            if prior.id is not None:
                logger.info("Replacing AAAA record %s — %s changed", prior.id, ", ".join(changed))
                self.delete(prior)
            else:
                logger.info("Prior AAAA record already removed — creating %s.%s", desired.name, desired.zone_name)
            desired.id = None
            self.create_or_update(desired, is_new=True, import_guard=import_guard)
            return desired

        desired.id = prior.id
        self.create_or_update(desired, is_new=False, import_guard=import_guard)
        return desired
