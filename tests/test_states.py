"""
Tests for the booking states and their transition table.
"""

import pytest

from room_booking.states import (
    STATE_TYPES,
    INITIAL_STATE,
    Action,
    BookingCancelledState,
    BookingConfirmedState,
    BookingState,
    IdleState,
    Outcome,
    PaidState,
    RoomSelectedState,
)


class TestStateNames:
    """Tests for state labels and terminal flags."""

    @pytest.mark.parametrize("state_cls,expected", [
        (IdleState, "Idle"),
        (RoomSelectedState, "RoomSelected"),
        (BookingConfirmedState, "BookingConfirmed"),
        (PaidState, "Paid"),
        (BookingCancelledState, "BookingCancelled"),
    ])
    def test_name(self, state_cls, expected):
        assert state_cls().name() == expected

    def test_names_are_unique(self):
        names = [state_cls().name() for state_cls in STATE_TYPES]
        assert len(set(names)) == len(STATE_TYPES) == 5

    def test_terminal_states(self):
        terminal = {state_cls().name() for state_cls in STATE_TYPES if state_cls().is_terminal}
        assert terminal == {"Paid", "BookingCancelled"}

    def test_initial_state_is_idle(self):
        assert INITIAL_STATE is IdleState

    def test_base_state_is_abstract(self):
        with pytest.raises(TypeError):
            BookingState()

    def test_states_compare_by_variant(self):
        assert PaidState() == PaidState()
        assert PaidState() != BookingCancelledState()


class TestDecide:
    """Tests for the pure transition decision."""

    @pytest.mark.parametrize("state_cls,action,expected", [
        (IdleState, Action.SELECT_ROOM, RoomSelectedState),
        (RoomSelectedState, Action.CONFIRM_BOOKING, BookingConfirmedState),
        (RoomSelectedState, Action.CANCEL, BookingCancelledState),
        (BookingConfirmedState, Action.PAY, PaidState),
        (BookingConfirmedState, Action.CANCEL, BookingCancelledState),
    ])
    def test_advancing_actions(self, state_cls, action, expected):
        transition = state_cls().decide(action)

        assert transition.outcome is Outcome.TRANSITIONED
        assert transition.changed
        assert isinstance(transition.next_state, expected)
        assert isinstance(transition.source, state_cls)

    @pytest.mark.parametrize("state_cls,action", [
        (IdleState, "confirm_booking"),
        (IdleState, "pay"),
        (IdleState, "cancel"),
        (RoomSelectedState, "select_room"),
        (RoomSelectedState, "pay"),
        (BookingConfirmedState, "select_room"),
        (BookingConfirmedState, "confirm_booking"),
    ])
    def test_unrecognized_actions_are_rejected(self, state_cls, action):
        transition = state_cls().decide(action)

        assert transition.outcome is Outcome.REJECTED
        assert transition.next_state is None
        assert not transition.changed

    @pytest.mark.parametrize("state_cls", [PaidState, BookingCancelledState])
    @pytest.mark.parametrize("action", ["select_room", "confirm_booking", "pay", "cancel", "anything"])
    def test_terminal_states_absorb_every_action(self, state_cls, action):
        transition = state_cls().decide(action)

        assert transition.outcome is Outcome.ALREADY_FINAL
        assert transition.next_state is None

    def test_plain_strings_match_actions(self):
        assert IdleState().decide("select_room").outcome is Outcome.TRANSITIONED

    @pytest.mark.parametrize("action", ["", "SELECT_ROOM", "select_room ", None, 42])
    def test_decide_is_total(self, any_state, action):
        transition = any_state.decide(action)

        assert transition.outcome in set(Outcome)
        if transition.changed:
            assert isinstance(transition.next_state, BookingState)
