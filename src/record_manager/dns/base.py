"""Abstract base class for record reconcilers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Self

from record_manager.models import AaaaRecordState


class RecordReconciler(ABC):
    """Lifecycle operations a host calls to converge one record set."""

    def close(self) -> None:
        """Release resources. Override in subclasses that hold open connections."""

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    @abstractmethod
    def create_or_update(self, state: AaaaRecordState, *, is_new: bool, import_guard: bool) -> None:
        """Make the remote record set match ``state``, then refresh ``state`` from Azure.

        Args:
            state: Desired state; ``id`` and computed fields are filled in on return.
            is_new: True when the caller has no prior state for this record.
            import_guard: Refuse to adopt a record set that already exists remotely.
        """

    @abstractmethod
    def read(self, state: AaaaRecordState) -> None:
        """Overwrite ``state`` from the remote record set identified by ``state.id``.

        Sets ``state.id`` to None when the record set no longer exists.
        """

    @abstractmethod
    def delete(self, state: AaaaRecordState) -> None:
        """Delete the remote record set identified by ``state.id``."""
