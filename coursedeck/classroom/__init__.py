"""
CourseDeck Classroom - Runtime components for playing a course.

This module provides:
- SlideCatalog: Ordered slides and progress metrics
- TrackingStore / LearnerRecord: SCORM-style learning record
- Evaluators: Per-slide completion gates
- Navigator: Slide progression state machine
- Course loading from YAML
"""

from .catalog import (
    SlideCatalog,
    ProgressReport,
    DEFAULT_NON_LESSON_TYPES,
)

from .tracking import (
    TrackingStore,
    LearnerRecord,
)

from .events import (
    Advance,
    Back,
    FlagSelected,
    OptionSelected,
    QuizSubmitted,
    LearnerEvent,
    parse_event,
    parse_events,
)

from .evaluators import (
    Evaluator,
    PassThroughEvaluator,
    InteractiveEvaluator,
    QuizEvaluator,
    EvaluationOutcome,
    QuizScore,
    calculate_quiz_score,
    create_evaluator,
    INCOMPLETE_SUBMISSION_MESSAGE,
)

from .navigator import (
    Navigator,
    NavigationState,
    NEXT_LABEL,
    FINISH_LABEL,
)

from .loader import (
    COURSES_DIR,
    DEFAULT_COURSE_NAME,
    course_from_dict,
    load_course,
    load_catalog,
    load_events,
    get_course_path,
    get_available_courses,
)

__all__ = [
    # Catalog
    "SlideCatalog",
    "ProgressReport",
    "DEFAULT_NON_LESSON_TYPES",
    # Tracking
    "TrackingStore",
    "LearnerRecord",
    # Events
    "Advance",
    "Back",
    "FlagSelected",
    "OptionSelected",
    "QuizSubmitted",
    "LearnerEvent",
    "parse_event",
    "parse_events",
    # Evaluators
    "Evaluator",
    "PassThroughEvaluator",
    "InteractiveEvaluator",
    "QuizEvaluator",
    "EvaluationOutcome",
    "QuizScore",
    "calculate_quiz_score",
    "create_evaluator",
    "INCOMPLETE_SUBMISSION_MESSAGE",
    # Navigator
    "Navigator",
    "NavigationState",
    "NEXT_LABEL",
    "FINISH_LABEL",
    # Loader
    "COURSES_DIR",
    "DEFAULT_COURSE_NAME",
    "course_from_dict",
    "load_course",
    "load_catalog",
    "load_events",
    "get_course_path",
    "get_available_courses",
]
