from fastapi import APIRouter
from mindsync.api import dashboard, emotions, health, reminders, schedules, sessions, timer

api_router = APIRouter()

# Include all sub-routers
api_router.include_router(health.router)
api_router.include_router(timer.router)
api_router.include_router(reminders.router)
api_router.include_router(schedules.router)
api_router.include_router(emotions.router)
api_router.include_router(sessions.router)
api_router.include_router(dashboard.router)
