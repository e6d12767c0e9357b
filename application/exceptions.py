"""
Application-layer exceptions.

These exceptions are used across the engines, use cases and API layer. The
API maps each of them to an HTTP status in the app factory.
"""


class ProgramStateError(Exception):
    """Invalid program state transition.

    Raised instead of silently overwriting state, e.g. when activating a
    program while another one is still active. The message is meant to be
    shown to the user as-is.
    """

    def __init__(self, message: str, *, current_program_id: str = None):
        super().__init__(message)
        self.message = message
        self.current_program_id = current_program_id


class ProgramNotFoundError(Exception):
    """A program ID that the caller requires could not be resolved."""

    def __init__(self, program_id: str):
        super().__init__(f"Program {program_id} not found")
        self.program_id = program_id


class WorkoutNotFoundError(Exception):
    """A workout ID that the caller requires could not be resolved."""

    def __init__(self, workout_id: str):
        super().__init__(f"Workout {workout_id} not found")
        self.workout_id = workout_id


class PresetDeletionError(Exception):
    """Preset programs and templates are read-only seed data."""

    def __init__(self, entity_id: str):
        super().__init__(f"{entity_id} is a preset and cannot be deleted")
        self.entity_id = entity_id


class TemplateNotFoundError(Exception):
    """A template ID that the caller requires could not be resolved."""

    def __init__(self, template_id: str):
        super().__init__(f"Template {template_id} not found")
        self.template_id = template_id
