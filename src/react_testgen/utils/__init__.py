"""Utility functions for react-testgen."""

from .file_utils import FileUtils
from .user_feedback import UserFeedback, StatusIcon

__all__ = [
    "FileUtils",
    "UserFeedback",
    "StatusIcon",
]
