"""Tests for RecordReconciler ABC."""

import pytest

from record_manager.dns.base import RecordReconciler


def test_cannot_instantiate_abc():
    with pytest.raises(TypeError, match="abstract"):
        RecordReconciler()


def test_concrete_subclass_works():
    class FakeReconciler(RecordReconciler):
        def create_or_update(self, state, *, is_new, import_guard):
            pass

        def read(self, state):
            pass

        def delete(self, state):
            pass

    with FakeReconciler() as reconciler:
        assert isinstance(reconciler, RecordReconciler)
