"""Validation gate between live edits and the renderers."""

from __future__ import annotations

import logging
from collections.abc import Callable

from screenfit.domain.value_objects import (
    CommittedSnapshot,
    RoomDimensions,
    ScreenDimensions,
)

logger = logging.getLogger(__name__)

SnapshotListener = Callable[[CommittedSnapshot], None]


class ValidationGate:
    """Holds the last committed snapshot and tracks staleness.

    A commit is accepted only when all seven measurements are positive.
    Rejected commits change nothing: the previous snapshot, if any, stays
    visible to renderers.
    """

    def __init__(self) -> None:
        self._snapshot: CommittedSnapshot | None = None
        self._has_been_validated = False
        self._is_stale = False
        self._subscribers: list[SnapshotListener] = []

    @property
    def snapshot(self) -> CommittedSnapshot | None:
        return self._snapshot

    @property
    def has_been_validated(self) -> bool:
        return self._has_been_validated

    @property
    def is_stale(self) -> bool:
        return self._is_stale

    @staticmethod
    def can_commit(screen: ScreenDimensions, room: RoomDimensions) -> bool:
        """True iff every screen and room measurement is strictly positive."""
        return screen.is_complete and room.is_complete

    def commit(self, screen: ScreenDimensions, room: RoomDimensions) -> bool:
        """Freeze the given dimensions into a snapshot.

        Args:
            screen: Live screen dimensions.
            room: Live room dimensions.

        Returns:
            True if the snapshot was accepted.
        """
        if not self.can_commit(screen, room):
            logger.debug("Commit refused: every dimension must be greater than zero")
            return False

        snapshot = CommittedSnapshot(screen=screen, room=room)
        self._snapshot = snapshot
        self._has_been_validated = True
        self._is_stale = False
        for subscriber in list(self._subscribers):
            subscriber(snapshot)
        return True

    def mark_stale(self) -> None:
        """Record that a live edit happened since the last commit."""
        self._is_stale = True

    def subscribe(self, callback: SnapshotListener) -> Callable[[], None]:
        """Register a callback for accepted commits.

        Returns:
            A function that removes the subscription.
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def close(self) -> None:
        """Release every subscription."""
        self._subscribers.clear()
