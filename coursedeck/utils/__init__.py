"""CourseDeck utilities."""

from .config import resolve_course_path, get_log_level, setup_logging

__all__ = ["resolve_course_path", "get_log_level", "setup_logging"]
