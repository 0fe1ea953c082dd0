"""Study reminders: polling scheduler and notifications"""
from .reminder_scheduler import ReminderScheduler
from .notifier import AlertFeed, ReminderAlert, ReminderNotifier

__all__ = ["ReminderScheduler", "AlertFeed", "ReminderAlert", "ReminderNotifier"]
