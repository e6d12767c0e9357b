"""
Fake Program and Template Repositories for testing.
"""
from typing import Dict, List, Optional

from application.exceptions import ProgramNotFoundError
from domain.models import TrainingProgram, WorkoutTemplate


class FakeProgramRepository:
    """In-memory fake implementation of ProgramRepository."""

    def __init__(self, programs: Optional[List[TrainingProgram]] = None):
        self._programs: Dict[str, TrainingProgram] = {}
        if programs:
            self.seed(programs)

    def reset(self) -> None:
        self._programs.clear()

    def seed(self, programs: List[TrainingProgram]) -> None:
        for program in programs:
            self._programs[program.id] = program.model_copy(deep=True)

    # =========================================================================
    # ProgramRepository Protocol Methods
    # =========================================================================

    def fetch_by_id(self, program_id: str) -> Optional[TrainingProgram]:
        program = self._programs.get(program_id)
        return program.model_copy(deep=True) if program else None

    def fetch_all(self) -> List[TrainingProgram]:
        return [
            p.model_copy(deep=True)
            for p in sorted(self._programs.values(), key=lambda p: p.sort_key)
        ]

    def save(self, program: TrainingProgram) -> TrainingProgram:
        self._programs[program.id] = program.model_copy(deep=True)
        return program

    def update(self, program: TrainingProgram) -> TrainingProgram:
        if program.id not in self._programs:
            raise ProgramNotFoundError(program.id)
        self._programs[program.id] = program.model_copy(deep=True)
        return program

    def delete(self, program_id: str) -> bool:
        return self._programs.pop(program_id, None) is not None


class FakeTemplateRepository:
    """In-memory fake implementation of TemplateRepository."""

    def __init__(self, templates: Optional[List[WorkoutTemplate]] = None):
        self._templates: Dict[str, WorkoutTemplate] = {}
        if templates:
            self.seed(templates)

    def reset(self) -> None:
        self._templates.clear()

    def seed(self, templates: List[WorkoutTemplate]) -> None:
        for template in templates:
            self._templates[template.id] = template.model_copy(deep=True)

    # =========================================================================
    # TemplateRepository Protocol Methods
    # =========================================================================

    def fetch_by_id(self, template_id: str) -> Optional[WorkoutTemplate]:
        template = self._templates.get(template_id)
        return template.model_copy(deep=True) if template else None

    def fetch_all(self) -> List[WorkoutTemplate]:
        return [
            t.model_copy(deep=True)
            for t in sorted(self._templates.values(), key=lambda t: t.name.casefold())
        ]

    def save(self, template: WorkoutTemplate) -> WorkoutTemplate:
        self._templates[template.id] = template.model_copy(deep=True)
        return template
