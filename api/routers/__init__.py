"""
Router package for the Training Progression API.

This package contains all API routers organized by domain:
- health: Health check endpoint
- programs: Program library and active-program lifecycle
- schedule: Unified training calendar
- sessions: Progressive overload suggestions
- workouts: Workout logging with PR detection
- records: Personal record queries and recalculation
"""

from api.routers.health import router as health_router
from api.routers.programs import router as programs_router
from api.routers.schedule import router as schedule_router
from api.routers.sessions import router as sessions_router
from api.routers.workouts import router as workouts_router
from api.routers.records import router as records_router

__all__ = [
    "health_router",
    "programs_router",
    "schedule_router",
    "sessions_router",
    "workouts_router",
    "records_router",
]
