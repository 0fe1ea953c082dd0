# API module exports
from mindsync.api import dashboard, emotions, health, reminders, schedules, sessions, timer
from mindsync.api.base import api_router
from mindsync.api.errors import register_exception_handlers

__all__ = ["dashboard", "emotions", "health", "reminders", "schedules", "sessions", "timer", "api_router", "register_exception_handlers"]
