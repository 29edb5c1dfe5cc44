"""Unit tests for the IAM service probes."""

from unittest.mock import MagicMock

from iam.application.observability import (
    DefaultPermissionEvaluatorProbe,
    DefaultReconciliationProbe,
    DefaultUserServiceProbe,
)
from shared_kernel.observability_context import ObservationContext


class TestDefaultReconciliationProbe:
    def test_user_reconciled_logs_info(self):
        logger = MagicMock()
        probe = DefaultReconciliationProbe(logger=logger)

        probe.user_reconciled(user_id=1, external_id="oid-1", was_created=True)

        logger.info.assert_called_once_with(
            "user_reconciled",
            user_id=1,
            external_id="oid-1",
            was_created=True,
        )

    def test_identity_rejected_logs_warning(self):
        logger = MagicMock()
        probe = DefaultReconciliationProbe(logger=logger)

        probe.identity_rejected(reason="missing object id")

        logger.warning.assert_called_once_with(
            "identity_rejected", reason="missing object id"
        )

    def test_with_context_keeps_logger(self):
        logger = MagicMock()
        probe = DefaultReconciliationProbe(logger=logger)

        bound = probe.with_context(ObservationContext(request_id="req-1"))
        bound.reconciliation_failed(external_id="oid-1", error="dup")

        assert bound._logger is logger
        logger.error.assert_called_once_with(
            "user_reconciliation_failed",
            external_id="oid-1",
            error="dup",
            request_id="req-1",
        )


class TestDefaultPermissionEvaluatorProbe:
    def test_checks_log_at_debug(self):
        logger = MagicMock()
        probe = DefaultPermissionEvaluatorProbe(logger=logger)

        probe.permission_checked(user_id=1, permission="ViewUsers", granted=True)

        logger.debug.assert_called_once()
        logger.info.assert_not_called()


class TestDefaultUserServiceProbe:
    def test_operation_failed_includes_details(self):
        logger = MagicMock()
        probe = DefaultUserServiceProbe(logger=logger)

        probe.operation_failed(operation="assign_role", error="boom", user_id=1)

        logger.error.assert_called_once_with(
            "user_operation_failed",
            operation="assign_role",
            error="boom",
            user_id=1,
        )
