"""
Course loader - Load course definitions from YAML files.

Course files live in the courses/ directory at the project root. Each
file holds one course: id, title, description and an ordered slide list.
"""

from pathlib import Path
from typing import Any

import yaml

from coursedeck.schemas import Course

from .catalog import SlideCatalog
from .events import LearnerEvent, parse_events


# Default courses directory (relative to project root)
COURSES_DIR = Path(__file__).parent.parent.parent / "courses"
DEFAULT_COURSE_NAME = "cybersecurity_awareness"


def course_from_dict(raw: dict[str, Any]) -> Course:
    """
    Validate raw course data.

    Raises:
        pydantic.ValidationError: If the data violates the course schema
    """
    return Course.model_validate(raw)


def load_course(path: Path) -> Course:
    """
    Load and validate a course file.

    Args:
        path: Path to a course YAML file

    Returns:
        Validated Course

    Raises:
        FileNotFoundError: If the course file doesn't exist
        ValueError: If the file is not valid YAML or not a YAML mapping
        pydantic.ValidationError: If the content violates the course schema
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Course file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        try:
            raw = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Course file is not valid YAML: {path}: {e}") from e

    if not isinstance(raw, dict):
        raise ValueError(f"Course file must contain a mapping: {path}")
    return course_from_dict(raw)


def load_catalog(path: Path) -> SlideCatalog:
    """Load a course file straight into a SlideCatalog."""
    return SlideCatalog(load_course(path))


def load_events(path: Path) -> list[LearnerEvent]:
    """
    Load a YAML event script for replay.

    An empty file is an empty script.

    Raises:
        FileNotFoundError: If the script doesn't exist
        ValueError: If the file is not valid YAML or holds an unknown event
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Event script not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        try:
            raw = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Event script is not valid YAML: {path}: {e}") from e

    return parse_events(raw or [])


def get_course_path(name: str, courses_dir: Path | None = None) -> Path:
    """Resolve a course name (without .yaml extension) to its file path."""
    dir_path = courses_dir or COURSES_DIR
    return dir_path / f"{name}.yaml"


def get_available_courses(courses_dir: Path | None = None) -> list[str]:
    """
    List all available course files.

    Returns:
        Sorted list of course names (without .yaml extension)
    """
    dir_path = courses_dir or COURSES_DIR
    if not dir_path.exists():
        return []
    return sorted(p.stem for p in dir_path.glob("*.yaml"))
