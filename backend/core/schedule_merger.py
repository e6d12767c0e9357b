"""
Schedule merge: one date-ordered calendar of logged and upcoming training.

Ground truth (logged workouts) is emitted for every date it exists. The active
program is then projected forward over a rolling window starting today; a date
that already has a logged workout is never projected, so the calendar never
shows a planned session on a day the user already trained.

The merge never fails. Dates outside the program's configured weeks, or days
whose template can no longer be resolved, degrade to omission or rest.
"""

import logging
from datetime import date, timedelta
from typing import Collection, Iterable, List, Optional, Set

from backend.core.program_progression import program_position
from domain.models import CalendarItem, TrainingProgram, Workout, utc_now

logger = logging.getLogger(__name__)

DEFAULT_WINDOW_DAYS = 30


def merge_schedule(
    workouts: Iterable[Workout],
    active_program: Optional[TrainingProgram] = None,
    start_date: Optional[date] = None,
    current_week: Optional[int] = None,
    window_days: int = DEFAULT_WINDOW_DAYS,
    today: Optional[date] = None,
    template_ids: Optional[Collection[str]] = None,
) -> List[CalendarItem]:
    """
    Merge logged workouts with the projected program schedule.

    Args:
        workouts: Logged workouts (any dates, any order)
        active_program: The profile's active program, if any
        start_date: Program activation date
        current_week: Week flagged as current on projected items
        window_days: Number of days to project, starting today (inclusive)
        today: Projection anchor; defaults to the current UTC date
        template_ids: Known template IDs; days pointing elsewhere become rest

    Returns:
        CalendarItems sorted ascending by date. Same-day items keep their
        emission order (completed workouts first, in input order).
    """
    items: List[CalendarItem] = [CalendarItem.completed(w) for w in workouts]

    if active_program is None or start_date is None:
        return sorted(items, key=lambda item: item.date)

    anchor = today or utc_now().date()
    trained_days: Set[date] = {item.date for item in items}
    known_templates = set(template_ids) if template_ids is not None else None

    for offset in range(max(window_days, 0)):
        on = anchor + timedelta(days=offset)
        if on in trained_days:
            continue

        week_number, day_of_week = program_position(start_date, on)
        week = active_program.week(week_number) if week_number >= 1 else None
        day = week.day_for(day_of_week) if week else None
        if day is None:
            continue

        is_current = current_week is not None and week_number == current_week

        if day.has_workout and (known_templates is None or day.template_id in known_templates):
            items.append(
                CalendarItem.planned(
                    on,
                    day,
                    week_number,
                    day.effective_intensity_modifier(week),
                    is_current_week=is_current,
                )
            )
        else:
            if day.has_workout:
                logger.warning(
                    f"Template {day.template_id} for {on} is missing; showing as rest"
                )
            items.append(CalendarItem.rest(on, day, week_number, is_current_week=is_current))

    logger.debug(f"Merged schedule: {len(items)} items over {window_days} days from {anchor}")
    return sorted(items, key=lambda item: item.date)


class ScheduleMerger:
    """
    Calendar builder bound to a window size.

    Usage:
        >>> merger = ScheduleMerger(window_days=30)
        >>> items = merger.merge(workouts, program, start_date=profile.active_program_start_date)
    """

    def __init__(self, window_days: int = DEFAULT_WINDOW_DAYS) -> None:
        self.window_days = window_days

    def merge(
        self,
        workouts: Iterable[Workout],
        active_program: Optional[TrainingProgram] = None,
        start_date: Optional[date] = None,
        current_week: Optional[int] = None,
        window_days: Optional[int] = None,
        today: Optional[date] = None,
        template_ids: Optional[Collection[str]] = None,
    ) -> List[CalendarItem]:
        return merge_schedule(
            workouts,
            active_program=active_program,
            start_date=start_date,
            current_week=current_week,
            window_days=self.window_days if window_days is None else window_days,
            today=today,
            template_ids=template_ids,
        )
