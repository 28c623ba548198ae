"""Local representation of a DNS AAAA record set."""

from __future__ import annotations

import ipaddress
from dataclasses import dataclass, field

from record_manager.resource_id import is_valid_target_resource_id
from record_manager.tags import validate_tags

MAX_TTL = 2147483647

# Changing any of these requires deleting and recreating the record set.
FORCE_NEW_FIELDS = ("name", "resource_group")


@dataclass
class AaaaRecordState:
    """Desired or observed state of one AAAA record set.

    The reconciler mutates instances in place. ``id`` is ``None`` until Azure has
    created the record set, and is reset to ``None`` once it is known to be gone.
    """

    name: str
    resource_group: str
    zone_name: str
    ttl: int
    records: frozenset[str] = frozenset()
    target_resource_id: str | None = None
    fqdn: str | None = None
    tags: dict[str, str] = field(default_factory=dict)
    id: str | None = None

    def __post_init__(self) -> None:
        self.records = frozenset(self.records)

    def validate(self) -> list[str]:
        """Return every problem that would make a create/update request invalid."""
        problems: list[str] = []
        if not self.records and not self.target_resource_id:
            problems.append("Neither 'records' nor 'target_resource_id' is defined")
        elif self.records and self.target_resource_id:
            problems.append("'records' conflicts with 'target_resource_id'; only one may be set")

        if isinstance(self.ttl, bool) or not isinstance(self.ttl, int):
            problems.append(f"'ttl' must be an integer, got: {self.ttl!r}")
        elif not 0 <= self.ttl <= MAX_TTL:
            problems.append(f"'ttl' must be between 0 and {MAX_TTL}, got: {self.ttl}")

        for address in sorted(self.records):
            try:
                ipaddress.IPv6Address(address)
            except ValueError:
                problems.append(f"{address!r} is not a valid IPv6 address")

        if self.target_resource_id and not is_valid_target_resource_id(self.target_resource_id):
            problems.append(f"'target_resource_id' is not a valid resource ID: {self.target_resource_id!r}")

        problems.extend(validate_tags(self.tags))
        return problems

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "resource_group": self.resource_group,
            "zone_name": self.zone_name,
            "ttl": self.ttl,
            "records": sorted(self.records),
            "target_resource_id": self.target_resource_id,
            "fqdn": self.fqdn,
            "tags": dict(self.tags),
            "id": self.id,
        }

    @classmethod
    def from_dict(cls, data: dict) -> AaaaRecordState:
        return cls(
            name=data["name"],
            resource_group=data["resource_group"],
            zone_name=data["zone_name"],
            ttl=data["ttl"],
            records=frozenset(data.get("records") or ()),
            target_resource_id=data.get("target_resource_id") or None,
            fqdn=data.get("fqdn"),
            tags=dict(data.get("tags") or {}),
            id=data.get("id") or None,
        )


def replacement_fields(prior: AaaaRecordState, desired: AaaaRecordState) -> list[str]:
    """Names of force-new fields whose value differs between ``prior`` and ``desired``."""
    return [f for f in FORCE_NEW_FIELDS if getattr(prior, f) != getattr(desired, f)]
