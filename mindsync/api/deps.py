"""Shared dependencies for API routes"""
from fastapi import HTTPException, Request

from mindsync.infra.supabase import get_supabase_client
from mindsync.infra.supabase.repositories import RepositoryFactory
from mindsync.services.inference import InferenceError, InferenceService, get_inference_service
from mindsync.services.reminders import ReminderNotifier
from mindsync.services.tracker import StudyTracker


def get_tracker(request: Request) -> StudyTracker:
    return request.app.state.tracker


def get_notifier(request: Request) -> ReminderNotifier:
    return request.app.state.notifier


def get_repositories() -> RepositoryFactory:
    return RepositoryFactory(get_supabase_client())


def get_inference() -> InferenceService:
    return get_inference_service()


def inference_http_error(e: InferenceError) -> HTTPException:
    """Surface an inference failure with its own status and message"""
    return HTTPException(status_code=e.status_code, detail=e.message)
