"""Dashboard statistics"""
from .dashboard_service import DashboardService, DashboardStats, build_dashboard_stats

__all__ = ["DashboardService", "DashboardStats", "build_dashboard_stats"]
