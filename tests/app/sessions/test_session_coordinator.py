"""Testes para SessionCoordinator e SessionStatus."""

from __future__ import annotations

import logging
from unittest.mock import MagicMock

import pytest

from app.sessions import SessionCoordinator, SessionStatus
from fsm import SessionEvent, SessionState


@pytest.fixture
def coordinator() -> SessionCoordinator:
    return SessionCoordinator()


class TestSessionStatus:
    def test_initial_snapshot(self, coordinator: SessionCoordinator) -> None:
        snapshot = coordinator.snapshot()
        assert snapshot == SessionStatus(state=SessionState.UNPAIRED)
        assert snapshot.ready is False
        assert snapshot.pending_pairing_code is None
        assert snapshot.has_pairing_code is False

    def test_log_dict_never_contains_the_code(self) -> None:
        status = SessionStatus(state=SessionState.AWAITING_SCAN, pending_pairing_code="2@secret")
        assert status.to_log_dict() == {
            "state": "AWAITING_SCAN",
            "ready": False,
            "has_pairing_code": True,
        }


class TestPairingLifecycle:
    """Eventos do motor → snapshot."""

    def test_qr_stores_pairing_code(self, coordinator: SessionCoordinator) -> None:
        snapshot = coordinator.handle_event(SessionEvent.QR_ISSUED, "2@abc")

        assert snapshot.state == SessionState.AWAITING_SCAN
        assert snapshot.pending_pairing_code == "2@abc"
        assert snapshot.ready is False
        assert coordinator.snapshot() is snapshot

    def test_renewed_qr_replaces_code(self, coordinator: SessionCoordinator) -> None:
        coordinator.handle_event(SessionEvent.QR_ISSUED, "2@first")
        snapshot = coordinator.handle_event(SessionEvent.QR_ISSUED, "2@second")
        assert snapshot.pending_pairing_code == "2@second"

    def test_authenticated_keeps_code_until_ready(self, coordinator: SessionCoordinator) -> None:
        coordinator.handle_event(SessionEvent.QR_ISSUED, "2@abc")
        authenticated = coordinator.handle_event(SessionEvent.AUTHENTICATED)
        assert authenticated.state == SessionState.AUTHENTICATED
        assert authenticated.pending_pairing_code == "2@abc"
        assert authenticated.ready is False

        ready = coordinator.handle_event(SessionEvent.READY)
        assert ready.state == SessionState.READY
        assert ready.ready is True
        assert ready.pending_pairing_code is None
        assert coordinator.is_ready is True

    def test_ready_without_prior_qr(self, coordinator: SessionCoordinator) -> None:
        """Sessão restaurada do perfil: pronto sem QR."""
        snapshot = coordinator.handle_event(SessionEvent.READY)
        assert snapshot.ready is True
        assert snapshot.has_pairing_code is False

    @pytest.mark.parametrize("event", [SessionEvent.AUTH_FAILURE, SessionEvent.DISCONNECTED])
    def test_failure_events_clear_readiness(
        self,
        coordinator: SessionCoordinator,
        event: SessionEvent,
    ) -> None:
        coordinator.handle_event(SessionEvent.READY)

        snapshot = coordinator.handle_event(event, "LOGOUT")

        assert snapshot.state == SessionState.UNPAIRED
        assert snapshot.ready is False
        assert snapshot.pending_pairing_code is None

    def test_auth_failure_clears_pending_code(self, coordinator: SessionCoordinator) -> None:
        coordinator.handle_event(SessionEvent.QR_ISSUED, "2@abc")
        snapshot = coordinator.handle_event(SessionEvent.AUTH_FAILURE, "pairing rejected")
        assert snapshot.pending_pairing_code is None

    def test_rejected_transition_keeps_previous_snapshot(
        self,
        coordinator: SessionCoordinator,
    ) -> None:
        ready = coordinator.handle_event(SessionEvent.READY)

        snapshot = coordinator.handle_event(SessionEvent.AUTHENTICATED)

        assert snapshot is ready
        assert coordinator.snapshot().state == SessionState.READY


class TestPairingCodeCallback:
    def test_callback_receives_each_new_code(self) -> None:
        callback = MagicMock()
        coordinator = SessionCoordinator(on_pairing_code=callback)

        coordinator.handle_event(SessionEvent.QR_ISSUED, "2@abc")
        coordinator.handle_event(SessionEvent.AUTHENTICATED)

        callback.assert_called_once_with("2@abc")

    def test_callback_failure_does_not_break_state(self) -> None:
        coordinator = SessionCoordinator(on_pairing_code=MagicMock(side_effect=OSError("tty closed")))

        snapshot = coordinator.handle_event(SessionEvent.QR_ISSUED, "2@abc")

        assert snapshot.state == SessionState.AWAITING_SCAN
        assert snapshot.pending_pairing_code == "2@abc"


class TestTransitionLogging:
    """Logs de transição: estado resumido, nunca o código QR."""

    def test_transition_log_carries_snapshot_without_code(
        self,
        coordinator: SessionCoordinator,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        with caplog.at_level(logging.INFO, logger="app.sessions.coordinator"):
            coordinator.handle_event(SessionEvent.QR_ISSUED, "2@secret")

        record = next(r for r in caplog.records if r.getMessage() == "session_transition")
        assert record.to_state == "AWAITING_SCAN"
        assert record.trigger == "qr"
        assert record.has_pairing_code is True
        assert record.ready is False
        assert all("2@secret" not in str(value) for value in vars(record).values())

    def test_rejected_transition_logs_state_summary(
        self,
        coordinator: SessionCoordinator,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        coordinator.handle_event(SessionEvent.READY)

        with caplog.at_level(logging.WARNING, logger="app.sessions.coordinator"):
            coordinator.handle_event(SessionEvent.AUTHENTICATED)

        record = next(
            r for r in caplog.records if r.getMessage() == "session_transition_rejected"
        )
        assert record.trigger == "authenticated"
        assert record.current_state == "READY"
        assert record.is_ready is True
        assert record.last_trigger == "ready"
        assert record.valid_targets == ["AWAITING_SCAN", "UNPAIRED"]
