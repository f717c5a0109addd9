"""Seat accounting and reservation tracking."""

from __future__ import annotations

from typing import FrozenSet, Iterable, List, Optional, Set

from loguru import logger

from studio_cli.core.constants import LOW_AVAILABILITY_THRESHOLD
from studio_cli.core.models import BookingStatus, ClassSession
from studio_cli.core.schedule import ScheduleStore


def available_seats(session: ClassSession) -> int:
    """Open seats, clamped at zero when upstream counts are inconsistent."""
    return max(0, session.capacity - session.booked)


def booking_status(session: ClassSession, is_booked: bool) -> BookingStatus:
    """Derive the display status for a session.

    Precedence: booked by the user, then full, then low availability
    (1 to 3 seats inclusive), then normal.
    """
    seats = available_seats(session)
    if is_booked:
        return BookingStatus(kind="booked", label="booked")
    if seats == 0:
        return BookingStatus(kind="full", label="full")
    if seats <= LOW_AVAILABILITY_THRESHOLD:
        return BookingStatus(kind="low", label=f"{seats} left")
    return BookingStatus(kind="open", label=f"{seats} spots")


class BookingLedger:
    """Set of session ids reserved by the current user.

    Capacity is not enforced here; callers check ``can_book`` first.
    """

    def __init__(
        self,
        schedule: Optional[ScheduleStore] = None,
        reservations: Optional[Set[str]] = None,
    ) -> None:
        self._schedule = schedule
        self._reservations: Set[str] = reservations if reservations is not None else set()

    @property
    def reservations(self) -> FrozenSet[str]:
        return frozenset(self._reservations)

    def _known(self, session_id: str) -> bool:
        return self._schedule is None or session_id in self._schedule

    def book(self, session_id: str) -> None:
        if not self._known(session_id):
            logger.debug(f"Ignoring booking for unknown session {session_id}")
            return
        if session_id in self._reservations:
            logger.debug(f"Session {session_id} already booked")
            return
        self._reservations.add(session_id)
        logger.debug(f"Booked session {session_id}")

    def cancel(self, session_id: str) -> None:
        if session_id not in self._reservations:
            logger.debug(f"Nothing to cancel for session {session_id}")
            return
        self._reservations.discard(session_id)
        logger.debug(f"Cancelled session {session_id}")

    def is_booked(self, session_id: str) -> bool:
        return session_id in self._reservations

    def available_seats(self, session: ClassSession) -> int:
        return available_seats(session)

    def status(self, session: ClassSession) -> BookingStatus:
        return booking_status(session, self.is_booked(session.id))

    def can_book(self, session: ClassSession) -> bool:
        return not self.is_booked(session.id) and available_seats(session) > 0

    def booked_sessions(self, sessions: Iterable[ClassSession]) -> List[ClassSession]:
        """Sessions from ``sessions`` the user holds, in schedule order."""
        return [session for session in sessions if session.id in self._reservations]

    def __len__(self) -> int:
        return len(self._reservations)
