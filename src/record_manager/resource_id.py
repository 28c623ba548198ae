"""Azure resource ID helpers for DNS AAAA record sets."""

from __future__ import annotations

from dataclasses import dataclass

from azure.mgmt.core.tools import is_valid_resource_id, parse_resource_id, resource_id

from record_manager.errors import InvalidResourceIdError

_NAMESPACE = "Microsoft.Network"
_ZONE_SEGMENT = "dnszones"
_RECORD_TYPE = "AAAA"


@dataclass(frozen=True)
class RecordId:
    """Components recovered from an AAAA record set resource ID."""

    subscription: str
    resource_group: str
    zone_name: str
    name: str


def _path_segments(parts: dict) -> dict[str, str]:
    """Map each ``type/name`` pair of a parsed ID to a lowercase-keyed dict."""
    segments: dict[str, str] = {}
    if "type" in parts and "name" in parts:
        segments[parts["type"].lower()] = parts["name"]
    for i in range(1, parts.get("last_child_num", 0) + 1):
        child_type = parts.get(f"child_type_{i}")
        child_name = parts.get(f"child_name_{i}")
        if child_type and child_name:
            segments[child_type.lower()] = child_name
    return segments


def parse_record_id(record_id: str) -> RecordId:
    """Split a record set ID into subscription, resource group, zone and record name.

    The zone is taken from the ``dnszones`` segment and the record name from the
    ``AAAA`` segment. Segment keys are matched case-insensitively.
    """
    if not record_id or not is_valid_resource_id(record_id):
        raise InvalidResourceIdError(f"Cannot parse DNS AAAA record ID: {record_id!r}")

    parts = parse_resource_id(record_id)
    resource_group = parts.get("resource_group")
    if not resource_group:
        raise InvalidResourceIdError(f"No resource group found in ID: {record_id!r}")

    segments = _path_segments(parts)
    zone_name = segments.get(_ZONE_SEGMENT)
    name = segments.get(_RECORD_TYPE.lower())
    if not zone_name:
        raise InvalidResourceIdError(f"No '{_ZONE_SEGMENT}' segment found in ID: {record_id!r}")
    if not name:
        raise InvalidResourceIdError(f"No '{_RECORD_TYPE}' segment found in ID: {record_id!r}")

    return RecordId(
        subscription=parts["subscription"],
        resource_group=resource_group,
        zone_name=zone_name,
        name=name,
    )


def format_record_id(subscription: str, resource_group: str, zone_name: str, name: str) -> str:
    """Build the resource ID Azure assigns to an AAAA record set."""
    return resource_id(
        subscription=subscription,
        resource_group=resource_group,
        namespace=_NAMESPACE,
        type=_ZONE_SEGMENT,
        name=zone_name,
        child_type_1=_RECORD_TYPE,
        child_name_1=name,
    )


def is_valid_target_resource_id(value: str) -> bool:
    """Return True if ``value`` looks like an ARM resource ID usable as an alias target."""
    return bool(value) and is_valid_resource_id(value)
