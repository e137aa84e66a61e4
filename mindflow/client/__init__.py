from mindflow.client.api import ApiError, MindflowClient
from mindflow.client.reminders import Reminder, ReminderBook
from mindflow.client.scanner import MoodScanner
from mindflow.client.storage import LocalStore

__all__ = ["ApiError", "MindflowClient", "Reminder", "ReminderBook", "MoodScanner", "LocalStore"]
