"""Dashboard endpoints"""
from fastapi import APIRouter, Depends
from pydantic import BaseModel

from mindsync.api.deps import get_repositories
from mindsync.infra.supabase.repositories import RepositoryFactory
from mindsync.services.dashboard import DashboardService, DashboardStats

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


class DashboardStatsResponse(BaseModel):
    stats: DashboardStats
    study_time_diff: str
    weekly_progress_percentage: int
    study_time_today_label: str
    weekly_study_time_label: str


@router.get("/stats", response_model=DashboardStatsResponse)
async def get_dashboard_stats(user_id: str, repos: RepositoryFactory = Depends(get_repositories)):
    stats = await DashboardService(repos).get_stats(user_id)
    return {
        "stats": stats,
        "study_time_diff": stats.study_time_diff,
        "weekly_progress_percentage": stats.weekly_progress_percentage,
        "study_time_today_label": stats.study_time_today_label,
        "weekly_study_time_label": stats.weekly_study_time_label,
    }
