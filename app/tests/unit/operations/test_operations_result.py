"""Unit tests for OperationResult and OperationStatus."""

import pytest

from langsection.operations.result import OperationResult
from langsection.operations.status import OperationStatus


@pytest.mark.unit
class TestOperationStatus:
    def test_operation_status_success(self):
        assert OperationStatus.SUCCESS.value == "success"

    def test_operation_status_not_found(self):
        assert OperationStatus.NOT_FOUND.value == "not_found"

    def test_operation_status_members(self):
        assert [status.value for status in OperationStatus] == ["success", "not_found"]


@pytest.mark.unit
class TestOperationResultFactories:
    def test_success_factory_minimal(self):
        result = OperationResult.success()
        assert result.status == OperationStatus.SUCCESS
        assert result.message == "ok"
        assert result.is_success

    def test_success_factory_with_data(self):
        data = {"topic": "ui"}
        result = OperationResult.success(data=data, message="bound")
        assert result.data == data
        assert result.message == "bound"

    def test_error_factory_with_error_code(self):
        result = OperationResult.error(
            OperationStatus.NOT_FOUND, "Language missing", error_code="language_state_invalid"
        )
        assert result.status == OperationStatus.NOT_FOUND
        assert result.error_code == "language_state_invalid"
        assert result.data is None
        assert not result.is_success

