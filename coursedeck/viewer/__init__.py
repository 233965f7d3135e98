"""
CourseDeck Viewer - Presentation surface and rendering components.

This module provides:
- The presentation surface contract and a state-keeping surface
- Slide, quiz, progress and completion rendering
"""

from .surface import (
    PresentationSurface,
    SurfaceState,
    StatefulSurface,
)

from .slides import (
    get_course_css,
    render_slide_html,
    render_quiz_html,
    render_progress_html,
    render_completion_html,
)

__all__ = [
    # Surface
    "PresentationSurface",
    "SurfaceState",
    "StatefulSurface",
    # Rendering
    "get_course_css",
    "render_slide_html",
    "render_quiz_html",
    "render_progress_html",
    "render_completion_html",
]
