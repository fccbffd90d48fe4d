"""Pytest configuration and shared fixtures for screenfit tests."""

from __future__ import annotations

import pytest

from screenfit.application import PlannerOutput, PlannerSession
from screenfit.domain.services import (
    DiagramLayoutEngine,
    ManualScheduler,
    SceneLayoutEngine,
    reconcile,
)
from screenfit.domain.value_objects import (
    CommittedSnapshot,
    RoomDimensions,
    ScreenDimensions,
    ScreenField,
)


# =============================================================================
# Shared dimension fixtures
# =============================================================================


@pytest.fixture
def screen_55() -> ScreenDimensions:
    """A 55 inch 16:9 screen (139.7 cm diagonal)."""
    return reconcile(ScreenField.DIAGONAL, 139.7, 16 / 9)


@pytest.fixture
def living_room() -> RoomDimensions:
    """A 4 x 5 m room, 2.438 m high, screen mounted 100 cm above the floor."""
    return RoomDimensions(
        width=400.0,
        depth=500.0,
        height=243.8,
        screen_mount_height=100.0,
    )


@pytest.fixture
def snapshot(screen_55: ScreenDimensions, living_room: RoomDimensions) -> CommittedSnapshot:
    return CommittedSnapshot(screen=screen_55, room=living_room)


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def session(scheduler: ManualScheduler):
    """A PlannerSession driven by a virtual clock, closed after the test."""
    planner = PlannerSession(scheduler=scheduler)
    yield planner
    planner.close()


@pytest.fixture
def planner_output(snapshot: CommittedSnapshot) -> PlannerOutput:
    """A complete planner output laid out on a 1200 x 900 canvas."""
    return PlannerOutput(
        snapshot=snapshot,
        diagram=DiagramLayoutEngine().layout_snapshot(snapshot, 1200, 900),
        scene=SceneLayoutEngine().layout(snapshot),
    )
