"""Admin registries for coaches, members and workout templates."""

from __future__ import annotations

from dataclasses import replace
from typing import Generic, Iterable, List, Optional, TypeVar

from loguru import logger

from studio_cli.core.models import Coach, Member, WorkoutTemplate

T = TypeVar("T", Coach, Member, WorkoutTemplate)


class Registry(Generic[T]):
    """Ordered list of records with generated ``<prefix>-N`` ids."""

    def __init__(self, prefix: str, items: Optional[Iterable[T]] = None) -> None:
        self.prefix = prefix
        self._items: List[T] = list(items or [])
        self._counter = len(self._items)

    def _next_id(self) -> str:
        taken = {item.id for item in self._items}
        while True:
            self._counter += 1
            candidate = f"{self.prefix}-{self._counter}"
            if candidate not in taken:
                return candidate

    def add(self, item: T) -> T:
        """Append ``item`` under a freshly generated id."""
        stored = replace(item, id=self._next_id())
        self._items.append(stored)
        logger.debug(f"Added {stored.id}")
        return stored

    def remove(self, item_id: str) -> bool:
        before = len(self._items)
        self._items = [item for item in self._items if item.id != item_id]
        removed = len(self._items) != before
        if not removed:
            logger.debug(f"Nothing to remove for {item_id}")
        return removed

    def get(self, item_id: str) -> Optional[T]:
        return next((item for item in self._items if item.id == item_id), None)

    def list(self) -> List[T]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)


def default_coaches() -> Registry[Coach]:
    return Registry(
        "coach",
        [
            Coach(
                id="coach-1",
                name="Sarah Coach",
                email="sarah@resiliente.com",
                specialties=("CrossFit", "Olympic Lifting"),
                bio="Certified CrossFit L2 trainer with 5+ years experience",
            ),
            Coach(
                id="coach-2",
                name="Mike Coach",
                email="mike@resiliente.com",
                specialties=("Strength Training", "Powerlifting"),
                bio="Former competitive powerlifter, specializes in strength development",
            ),
            Coach(
                id="coach-3",
                name="Alex Coach",
                email="alex@resiliente.com",
                specialties=("CrossFit", "Gymnastics"),
                bio="Movement specialist with gymnastics background",
            ),
        ],
    )


def default_members() -> Registry[Member]:
    return Registry(
        "member",
        [
            Member(
                id="member-1",
                name="John Doe",
                email="john@example.com",
                membership_type="premium",
                join_date="2024-01-15",
            ),
            Member(
                id="member-2",
                name="Jane Smith",
                email="jane@example.com",
                membership_type="standard",
                join_date="2024-02-20",
            ),
        ],
    )


def default_templates() -> Registry[WorkoutTemplate]:
    return Registry(
        "template",
        [
            WorkoutTemplate(
                id="template-1",
                name="CrossFit WOD",
                kind="crossfit",
                description="21-15-9 reps for time of: Thrusters (95/65 lbs), Pull-ups",
            ),
            WorkoutTemplate(
                id="template-2",
                name="CrossFit AMRAP",
                kind="crossfit",
                description="20 minute AMRAP: 5 Pull-ups, 10 Push-ups, 15 Air Squats",
            ),
            WorkoutTemplate(
                id="template-3",
                name="Open Gym",
                kind="opengym",
                description="Free access to all gym equipment and space",
            ),
        ],
    )
