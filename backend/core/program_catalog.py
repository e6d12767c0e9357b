"""
Preset program and template catalog.

Presets live in shared/catalog/*.yaml. Programs are described compactly by a
list of weekly layouts plus a progression pattern; loading expands them into
fully configured TrainingPrograms with one ProgramWeek per week of duration.

Preset IDs are stable slugs so that seeding is idempotent and weeks/days keep
the same identity across reloads.
"""

import logging
import pathlib
from functools import lru_cache
from typing import Any, Dict, List, Optional, Tuple

import yaml

from application.ports import ProgramRepository, TemplateRepository
from domain.models import (
    ProgramDay,
    ProgramWeek,
    TemplateExercise,
    TrainingPhase,
    TrainingProgram,
    WeekProgressionPattern,
    WorkoutTemplate,
)

logger = logging.getLogger(__name__)

ROOT = pathlib.Path(__file__).resolve().parents[2]
DEFAULT_CATALOG_DIR = ROOT / "shared" / "catalog"

# Volume multiplier applied to pattern deload weeks
DELOAD_VOLUME_MODIFIER = 0.6
MAX_MODIFIER = 2.0


def _read_yaml(path: pathlib.Path) -> List[Dict[str, Any]]:
    data = yaml.safe_load(path.read_text()) or []
    if not isinstance(data, list):
        raise ValueError(f"{path} must contain a list of entries")
    return data


def build_template(entry: Dict[str, Any]) -> WorkoutTemplate:
    """Build a preset template from its catalog entry."""
    exercises = [
        TemplateExercise(
            id=f"{entry['id']}-{order}",
            order=order,
            **exercise,
        )
        for order, exercise in enumerate(entry.get("exercises", []))
    ]
    return WorkoutTemplate(
        id=entry["id"],
        name=entry["name"],
        category=entry.get("category", "strength"),
        version=entry.get("version", 1),
        exercises=exercises,
        is_preset=True,
    )


def build_program(entry: Dict[str, Any]) -> TrainingProgram:
    """
    Expand a compact catalog entry into a fully configured program.

    Week N uses layout (N - 1) % len(schedule). Intensity comes from the
    progression pattern; pattern deload weeks also reduce volume.

    An optional `weeks` list is cycled the same way and may set name, notes,
    phase_tag, intensity_modifier, volume_modifier and is_deload for a week,
    taking precedence over the pattern. The custom pattern requires it.
    """
    program_id = entry["id"]
    pattern = WeekProgressionPattern(entry.get("progression_pattern", "linear"))
    schedule = entry.get("schedule") or []
    if not schedule:
        raise ValueError(f"Program {program_id} has an empty schedule")
    week_settings = entry.get("weeks") or []
    if pattern is WeekProgressionPattern.CUSTOM and not week_settings:
        raise ValueError(f"Program {program_id} uses the custom pattern but lists no weeks")

    weeks: List[ProgramWeek] = []
    for week_number in range(1, entry["duration_weeks"] + 1):
        layout = schedule[(week_number - 1) % len(schedule)]
        settings = week_settings[(week_number - 1) % len(week_settings)] if week_settings else {}
        is_deload = settings.get("is_deload", pattern.is_deload_week(week_number))
        intensity = settings.get(
            "intensity_modifier", min(pattern.intensity_modifier(week_number), MAX_MODIFIER)
        )
        volume = settings.get("volume_modifier", DELOAD_VOLUME_MODIFIER if is_deload else 1.0)
        phase = settings.get("phase_tag", TrainingPhase.DELOAD if is_deload else None)

        days = [
            ProgramDay(id=f"{program_id}-w{week_number}-d{day['day_of_week']}", **day)
            for day in layout
        ]
        weeks.append(
            ProgramWeek(
                id=f"{program_id}-w{week_number}",
                week_number=week_number,
                name=settings.get("name"),
                notes=settings.get("notes"),
                phase_tag=phase,
                intensity_modifier=intensity,
                volume_modifier=volume,
                is_deload=is_deload,
                days=days,
            )
        )

    return TrainingProgram(
        id=program_id,
        name=entry["name"],
        description=entry.get("description"),
        category=entry["category"],
        difficulty=entry["difficulty"],
        duration_weeks=entry["duration_weeks"],
        progression_pattern=pattern,
        is_custom=False,
        weeks=weeks,
    )


class ProgramCatalog:
    """
    Read-only preset catalog.

    Usage:
        >>> catalog = ProgramCatalog.load()
        >>> catalog.program("stronglifts-5x5").duration_weeks
        12
    """

    def __init__(
        self,
        programs: List[TrainingProgram],
        templates: List[WorkoutTemplate],
    ):
        self._programs = {p.id: p for p in programs}
        self._templates = {t.id: t for t in templates}

        for program in programs:
            missing = program.template_ids() - set(self._templates)
            if missing:
                raise ValueError(
                    f"Program {program.id} references unknown templates: {sorted(missing)}"
                )

    @classmethod
    def load(cls, path: Optional[pathlib.Path] = None) -> "ProgramCatalog":
        """
        Load the catalog from a directory holding programs.yaml and templates.yaml.

        Args:
            path: Catalog directory (defaults to shared/catalog)
        """
        directory = pathlib.Path(path) if path else DEFAULT_CATALOG_DIR
        templates = [build_template(e) for e in _read_yaml(directory / "templates.yaml")]
        programs = [build_program(e) for e in _read_yaml(directory / "programs.yaml")]
        logger.debug(
            f"Loaded catalog from {directory}: {len(programs)} programs, "
            f"{len(templates)} templates"
        )
        return cls(programs, templates)

    def programs(self) -> List[TrainingProgram]:
        """Fresh copies of every preset program, ordered by name."""
        return [
            p.model_copy(deep=True)
            for p in sorted(self._programs.values(), key=lambda p: p.sort_key)
        ]

    def templates(self) -> List[WorkoutTemplate]:
        return [
            t.model_copy(deep=True)
            for t in sorted(self._templates.values(), key=lambda t: t.name.casefold())
        ]

    def program(self, program_id: str) -> Optional[TrainingProgram]:
        program = self._programs.get(program_id)
        return program.model_copy(deep=True) if program else None

    def template(self, template_id: str) -> Optional[WorkoutTemplate]:
        template = self._templates.get(template_id)
        return template.model_copy(deep=True) if template else None


@lru_cache()
def get_catalog(path: Optional[str] = None) -> ProgramCatalog:
    """Cached catalog, loaded once per path."""
    return ProgramCatalog.load(pathlib.Path(path) if path else None)


def seed_presets(
    program_repo: ProgramRepository,
    template_repo: TemplateRepository,
    catalog: Optional[ProgramCatalog] = None,
) -> Tuple[int, int]:
    """
    Insert catalog presets that are not stored yet.

    Existing rows are left alone so usage counters survive re-seeding.
    Templates go first because program days reference them.

    Returns:
        (programs_added, templates_added)
    """
    catalog = catalog or get_catalog()

    templates_added = 0
    for template in catalog.templates():
        if template_repo.fetch_by_id(template.id) is None:
            template_repo.save(template)
            templates_added += 1

    programs_added = 0
    for program in catalog.programs():
        if program_repo.fetch_by_id(program.id) is None:
            program_repo.save(program)
            programs_added += 1

    logger.info(
        f"Seeded presets: {programs_added} programs, {templates_added} templates"
    )
    return programs_added, templates_added
