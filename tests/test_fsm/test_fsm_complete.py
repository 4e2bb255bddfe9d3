"""
Testes abrangentes para o módulo FSM da sessão WhatsApp.

Cobre estados, mapa de transições, guards e a máquina de estados
aplicando eventos do cliente de sessão.
"""

from datetime import datetime

import pytest

from fsm import (
    DEFAULT_INITIAL_STATE,
    EVENT_TARGETS,
    SENDABLE_STATES,
    VALID_TRANSITIONS,
    GuardResult,
    SessionEvent,
    SessionState,
    SessionStateMachine,
    StateTransition,
    TransitionResult,
    create_fsm,
    evaluate_guards,
    get_valid_targets,
    is_ready,
    is_transition_valid,
    is_valid_state,
    target_for_event,
    validate_transition_map,
)
from fsm.rules.guards import DEFAULT_GUARDS, REFLEXIVE_STATES, guard_same_state, guard_valid_state


class TestSessionStatesAndEvents:
    """Enum de estados, eventos e helpers de estado."""

    def test_session_state_enum_has_four_states(self) -> None:
        assert set(SessionState) == {
            SessionState.UNPAIRED,
            SessionState.AWAITING_SCAN,
            SessionState.AUTHENTICATED,
            SessionState.READY,
        }
        assert DEFAULT_INITIAL_STATE == SessionState.UNPAIRED
        for state in SessionState:
            assert is_valid_state(state) is True

    def test_only_ready_accepts_sends(self) -> None:
        assert SENDABLE_STATES == frozenset({SessionState.READY})
        for state in SessionState:
            assert is_ready(state) is (state == SessionState.READY)

    def test_state_values_are_explicit_strings(self) -> None:
        for state in SessionState:
            assert state.value == state.name
            assert str(state) == state.name

    def test_event_values_match_engine_event_names(self) -> None:
        assert [event.value for event in SessionEvent] == [
            "qr",
            "authenticated",
            "ready",
            "auth_failure",
            "disconnected",
        ]


class TestTransitionRules:
    """VALID_TRANSITIONS, EVENT_TARGETS e validação do mapa."""

    def test_transition_map_is_valid(self) -> None:
        assert validate_transition_map() == []
        assert set(VALID_TRANSITIONS) == set(SessionState)

    @pytest.mark.parametrize(
        ("event", "target"),
        [
            (SessionEvent.QR_ISSUED, SessionState.AWAITING_SCAN),
            (SessionEvent.AUTHENTICATED, SessionState.AUTHENTICATED),
            (SessionEvent.READY, SessionState.READY),
            (SessionEvent.AUTH_FAILURE, SessionState.UNPAIRED),
            (SessionEvent.DISCONNECTED, SessionState.UNPAIRED),
        ],
    )
    def test_event_targets(self, event: SessionEvent, target: SessionState) -> None:
        assert EVENT_TARGETS[event] == target
        assert target_for_event(event) == target

    def test_ready_cannot_fall_back_to_authenticated(self) -> None:
        assert is_transition_valid(SessionState.READY, SessionState.AUTHENTICATED) is False
        assert SessionState.AUTHENTICATED not in get_valid_targets(SessionState.READY)

    def test_every_state_can_reach_unpaired(self) -> None:
        for state in SessionState:
            assert is_transition_valid(state, SessionState.UNPAIRED)


class TestGuards:
    """Guards de transição."""

    def test_reflexive_only_for_unpaired_and_awaiting_scan(self) -> None:
        assert REFLEXIVE_STATES == frozenset({SessionState.UNPAIRED, SessionState.AWAITING_SCAN})
        assert guard_same_state(SessionState.AWAITING_SCAN, SessionState.AWAITING_SCAN).allowed
        assert guard_same_state(SessionState.UNPAIRED, SessionState.UNPAIRED).allowed

        denied = guard_same_state(SessionState.READY, SessionState.READY)
        assert denied.allowed is False
        assert "reflexiva" in (denied.reason or "")

    def test_guard_valid_state_rejects_unknown_values(self) -> None:
        result = guard_valid_state("BOGUS", SessionState.READY)  # type: ignore[arg-type]
        assert result.allowed is False

    def test_evaluate_guards_uses_defaults_and_custom_lists(self) -> None:
        assert len(DEFAULT_GUARDS) == 2
        assert evaluate_guards(SessionState.UNPAIRED, SessionState.AWAITING_SCAN).allowed

        def deny_all(from_state: SessionState, to_state: SessionState) -> GuardResult:
            return GuardResult.deny("blocked")

        result = evaluate_guards(SessionState.UNPAIRED, SessionState.AWAITING_SCAN, [deny_all])
        assert result.allowed is False
        assert result.reason == "blocked"


class TestSessionStateMachine:
    """Aplicação de eventos na máquina."""

    def test_pairing_lifecycle(self) -> None:
        machine = create_fsm()
        assert machine.current_state == SessionState.UNPAIRED
        assert machine.is_ready is False

        for event, expected in (
            (SessionEvent.QR_ISSUED, SessionState.AWAITING_SCAN),
            (SessionEvent.QR_ISSUED, SessionState.AWAITING_SCAN),
            (SessionEvent.AUTHENTICATED, SessionState.AUTHENTICATED),
            (SessionEvent.READY, SessionState.READY),
        ):
            result = machine.apply_event(event)
            assert result.success is True
            assert machine.current_state == expected

        assert machine.is_ready is True
        assert machine.last_transition is not None
        assert machine.last_transition.trigger == SessionEvent.READY

    def test_restored_session_goes_straight_to_ready(self) -> None:
        machine = SessionStateMachine()
        assert machine.apply_event(SessionEvent.READY).success is True
        assert machine.is_ready is True

    def test_disconnect_and_re_pair(self) -> None:
        machine = SessionStateMachine(initial_state=SessionState.READY)

        result = machine.apply_event(SessionEvent.DISCONNECTED, reason="LOGOUT")
        assert result.success is True
        assert result.transition is not None
        assert result.transition.reason == "LOGOUT"
        assert machine.current_state == SessionState.UNPAIRED

        assert machine.apply_event(SessionEvent.QR_ISSUED).success is True
        assert machine.current_state == SessionState.AWAITING_SCAN

    def test_auth_failure_clears_readiness(self) -> None:
        machine = SessionStateMachine(initial_state=SessionState.AUTHENTICATED)
        assert machine.apply_event(SessionEvent.AUTH_FAILURE).success is True
        assert machine.current_state == SessionState.UNPAIRED
        assert machine.is_ready is False

    def test_duplicate_ready_is_rejected_without_changing_state(self) -> None:
        machine = SessionStateMachine(initial_state=SessionState.READY)
        result = machine.apply_event(SessionEvent.READY)
        assert result.success is False
        assert result.error_reason
        assert machine.current_state == SessionState.READY

    def test_authenticated_after_ready_is_rejected(self) -> None:
        machine = SessionStateMachine(initial_state=SessionState.READY)
        result = machine.apply_event(SessionEvent.AUTHENTICATED)
        assert result.success is False
        assert "Transição inválida" in (result.error_reason or "")

    def test_state_summary(self) -> None:
        machine = create_fsm()
        machine.apply_event(SessionEvent.QR_ISSUED)

        summary = machine.get_state_summary()
        assert summary["current_state"] == "AWAITING_SCAN"
        assert summary["last_trigger"] == "qr"
        assert "READY" in summary["valid_targets"]
        assert summary["is_ready"] is False


class TestTransitionTypes:
    """StateTransition e TransitionResult."""

    def test_state_transition_log_dict(self) -> None:
        transition = StateTransition(
            from_state=SessionState.AWAITING_SCAN,
            to_state=SessionState.AUTHENTICATED,
            trigger=SessionEvent.AUTHENTICATED,
        )
        log = transition.to_log_dict()
        assert log["from_state"] == "AWAITING_SCAN"
        assert log["to_state"] == "AUTHENTICATED"
        assert log["trigger"] == "authenticated"
        assert log["reason"] is None
        assert datetime.fromisoformat(log["timestamp"]).tzinfo is not None

    def test_state_transition_requires_session_event(self) -> None:
        with pytest.raises(ValueError):
            StateTransition(
                from_state=SessionState.UNPAIRED,
                to_state=SessionState.AWAITING_SCAN,
                trigger="qr",  # type: ignore[arg-type]
            )

    def test_failed_result_has_no_transition(self) -> None:
        result = TransitionResult(success=False, error_reason="nope")
        assert result.transition is None
