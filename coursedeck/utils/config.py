"""
Runtime configuration for CourseDeck.

Settings come from the environment (optionally populated from a .env
file by the entry points via python-dotenv):

    COURSEDECK_COURSE     course name or path to a course YAML file
    COURSEDECK_LOG_LEVEL  logging level name (default: INFO)
"""

import logging
import os
from pathlib import Path

from coursedeck.classroom.loader import COURSES_DIR, DEFAULT_COURSE_NAME, get_course_path


COURSE_ENV_VAR = "COURSEDECK_COURSE"
LOG_LEVEL_ENV_VAR = "COURSEDECK_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def resolve_course_path(value: str | None = None, courses_dir: Path | None = None) -> Path:
    """
    Resolve the course to load.

    A value ending in .yaml/.yml is treated as a file path; anything else
    is a course name looked up in the courses directory. Falls back to
    COURSEDECK_COURSE, then to the bundled default course.
    """
    value = value or os.environ.get(COURSE_ENV_VAR) or DEFAULT_COURSE_NAME
    if value.endswith((".yaml", ".yml")):
        return Path(value)
    return get_course_path(value, courses_dir or COURSES_DIR)


def get_log_level(default: int = logging.INFO) -> int:
    """Read the log level from COURSEDECK_LOG_LEVEL."""
    name = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip().upper()
    if not name:
        return default
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else default


def setup_logging(verbose: bool = False) -> None:
    """Configure root logging for entry points."""
    level = logging.DEBUG if verbose else get_log_level()
    logging.basicConfig(level=level, format=LOG_FORMAT)
