"""
CourseDeck Schemas - Pydantic models for the slide course player.

This module exports all schema classes for:
- Slides: slide types, quiz questions, course document
- Tracking: record keys, defaults, statuses, completion summary
"""

# Slide schemas
from .slide import (
    SlideType,
    SlideBase,
    IntroSlide,
    ContentSlide,
    InteractiveSlide,
    QuizQuestion,
    QuizSlide,
    CompleteSlide,
    Slide,
    GATED_SLIDE_TYPES,
    Course,
)

# Tracking schemas
from .tracking import (
    TrackingKey,
    CompletionStatus,
    SuccessStatus,
    InteractionResult,
    DEFAULT_RECORD,
    CourseSummary,
)

__all__ = [
    # Slide
    'SlideType',
    'SlideBase',
    'IntroSlide',
    'ContentSlide',
    'InteractiveSlide',
    'QuizQuestion',
    'QuizSlide',
    'CompleteSlide',
    'Slide',
    'GATED_SLIDE_TYPES',
    'Course',
    # Tracking
    'TrackingKey',
    'CompletionStatus',
    'SuccessStatus',
    'InteractionResult',
    'DEFAULT_RECORD',
    'CourseSummary',
]
