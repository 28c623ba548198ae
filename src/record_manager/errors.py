"""Exceptions raised by AAAA record reconciliation."""

from __future__ import annotations


class InvalidResourceIdError(ValueError):
    """Raised when a stored identifier is not a DNS AAAA record resource ID."""


class RecordError(Exception):
    """Base class for failures tied to a specific record set."""

    def __init__(self, message: str, name: str, zone_name: str, resource_group: str) -> None:
        self.name = name
        self.zone_name = zone_name
        self.resource_group = resource_group
        super().__init__(f"{message} (DNS AAAA Record {name!r} / Zone {zone_name!r} / Resource Group {resource_group!r})")


class RecordValidationError(RecordError, ValueError):
    """The desired state is invalid; no remote call was issued."""


class RecordAlreadyExistsError(RecordError):
    """A record with the same key already exists and the import guard is active."""

    def __init__(self, existing_id: str, name: str, zone_name: str, resource_group: str) -> None:
        self.existing_id = existing_id
        super().__init__(
            f"A resource with the ID {existing_id!r} already exists - "
            "it must be imported before it can be managed",
            name,
            zone_name,
            resource_group,
        )


class RemoteCallError(RecordError):
    """An Azure DNS API call failed. The SDK exception is chained as ``__cause__``."""

    def __init__(self, operation: str, name: str, zone_name: str, resource_group: str, detail: str) -> None:
        self.operation = operation
        super().__init__(f"Error {operation}: {detail}", name, zone_name, resource_group)


class MissingRecordIdError(RecordError):
    """The API reported success but returned a record set without an ID."""


class RecordDeleteStatusError(RecordError):
    """Delete returned a status other than 200 without raising."""

    def __init__(self, status_code: int | None, name: str, zone_name: str, resource_group: str) -> None:
        self.status_code = status_code
        super().__init__(
            f"Delete returned unexpected status {status_code} with no error detail; "
            "the record may already have been removed",
            name,
            zone_name,
            resource_group,
        )


class RecordNotFoundError(RecordError):
    """The record set does not exist in Azure."""
