"""Reservation and room state mapping between Mews and connector formats."""

from enum import Enum
from typing import Optional, TypeVar

E = TypeVar("E", bound=Enum)


class MewsReservationState(str, Enum):
    """Reservation states used by Mews."""

    CONFIRMED = "Confirmed"
    STARTED = "Started"
    PROCESSED = "Processed"
    OPTIONAL = "Optional"
    CANCELED = "Canceled"


class MewsResourceState(str, Enum):
    """Housekeeping states of a Mews resource (room)."""

    DIRTY = "Dirty"
    CLEAN = "Clean"
    INSPECTED = "Inspected"
    OUT_OF_SERVICE = "OutOfService"
    OUT_OF_ORDER = "OutOfOrder"


class ReservationStatus(str, Enum):
    """Connector reservation status."""

    CONFIRMED = "confirmed"
    PENDING = "pending"
    CANCELLED = "cancelled"


class RoomState(str, Enum):
    """Connector room state."""

    UNASSIGNED = "unassigned"
    ASSIGNED = "assigned"
    CHECKED_IN = "checked-in"


STATE_MAPPING: dict[MewsReservationState, ReservationStatus] = {
    MewsReservationState.CONFIRMED: ReservationStatus.CONFIRMED,
    MewsReservationState.STARTED: ReservationStatus.CONFIRMED,
    MewsReservationState.PROCESSED: ReservationStatus.CONFIRMED,
    MewsReservationState.OPTIONAL: ReservationStatus.PENDING,
    MewsReservationState.CANCELED: ReservationStatus.CANCELLED,
}

ROOM_STATE_MAPPING: dict[MewsResourceState, RoomState] = {
    MewsResourceState.DIRTY: RoomState.UNASSIGNED,
    MewsResourceState.CLEAN: RoomState.ASSIGNED,
    MewsResourceState.INSPECTED: RoomState.ASSIGNED,
    MewsResourceState.OUT_OF_SERVICE: RoomState.UNASSIGNED,
    MewsResourceState.OUT_OF_ORDER: RoomState.UNASSIGNED,
}

ACTIVE_STATES = [
    MewsReservationState.CONFIRMED,
    MewsReservationState.STARTED,
    MewsReservationState.PROCESSED,
]

STATUS_FILTER_STATES: dict[ReservationStatus, list[MewsReservationState]] = {
    ReservationStatus.CONFIRMED: ACTIVE_STATES,
    ReservationStatus.PENDING: [MewsReservationState.OPTIONAL],
    ReservationStatus.CANCELLED: [MewsReservationState.CANCELED],
}


def _parse(enum_cls: type[E], value: Optional[str]) -> Optional[E]:
    try:
        return enum_cls(value)
    except ValueError:
        return None


class ReservationStatusMapper:
    """Maps Mews reservation and resource states to connector format."""

    @staticmethod
    def map_state_to_status(mews_state: Optional[str]) -> ReservationStatus:
        """Map a Mews reservation state to the connector status.

        Mapping:
        - Confirmed, Started, Processed → confirmed
        - Optional → pending
        - Canceled → cancelled
        - anything else → confirmed

        Args:
            mews_state: Reservation state from Mews (e.g., "Started")

        Returns:
            Connector reservation status
        """
        state = _parse(MewsReservationState, mews_state)
        if state is None:
            return ReservationStatus.CONFIRMED
        return STATE_MAPPING.get(state, ReservationStatus.CONFIRMED)

    @staticmethod
    def map_room_state(
        mews_state: Optional[str],
        resource_state: Optional[str],
        has_resource: bool,
    ) -> RoomState:
        """Determine the room state of a reservation.

        No assigned resource is always "unassigned". Otherwise the resource
        housekeeping state is mapped (unknown → assigned), and a Started
        reservation is reported as "checked-in" regardless of it.

        Args:
            mews_state: Reservation state from Mews
            resource_state: State of the assigned resource, if any
            has_resource: Whether a resource is assigned and known

        Returns:
            Connector room state
        """
        if not has_resource:
            return RoomState.UNASSIGNED

        if _parse(MewsReservationState, mews_state) is MewsReservationState.STARTED:
            return RoomState.CHECKED_IN

        state = _parse(MewsResourceState, resource_state)
        if state is None:
            return RoomState.ASSIGNED
        return ROOM_STATE_MAPPING.get(state, RoomState.ASSIGNED)

    @staticmethod
    def map_status_filter_to_states(status: Optional[str]) -> list[str]:
        """Translate a connector status filter into Mews reservation states.

        Args:
            status: "confirmed", "pending", "cancelled" or None

        Returns:
            Mews state names to request; confirmed-like states by default
        """
        status_filter = _parse(ReservationStatus, status)
        states = STATUS_FILTER_STATES.get(status_filter, ACTIVE_STATES)
        return [state.value for state in states]
