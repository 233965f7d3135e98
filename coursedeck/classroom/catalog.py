"""
SlideCatalog - Ordered, immutable slide sequence with progress metrics.

Provides:
- Index-based slide access
- Lesson slide counting (intro/complete excluded by default)
- Finish index and complete index lookup
- Progress label and percentage for any position
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

from coursedeck.schemas import Course, GATED_SLIDE_TYPES, SlideType


DEFAULT_NON_LESSON_TYPES = frozenset({SlideType.INTRO, SlideType.COMPLETE})


@dataclass(frozen=True)
class ProgressReport:
    """Progress indicator for one position."""
    label: str
    percent: float
    lesson_number: int
    total_lessons: int


class SlideCatalog:
    """
    Read-only view over a course's slides.

    The index into the catalog is the only position reference used by
    navigation; the catalog itself is never mutated.
    """

    def __init__(
        self,
        course: Course,
        non_lesson_types: Iterable[SlideType] = DEFAULT_NON_LESSON_TYPES,
    ):
        """
        Initialize catalog.

        Args:
            course: Validated course document
            non_lesson_types: Slide types excluded from lesson counting
        """
        self.course = course
        self._slides = course.slides
        self._non_lesson_types = frozenset(SlideType(t).value for t in non_lesson_types)
        self._complete_index = next(
            (idx for idx, slide in enumerate(self._slides) if slide.type == SlideType.COMPLETE),
            None,
        )
        self._lesson_prefix_counts = self._count_lessons()

    def _count_lessons(self) -> list[int]:
        """Running count of lesson slides at or before each index."""
        counts = []
        running = 0
        for slide in self._slides:
            if self.is_lesson(slide):
                running += 1
            counts.append(running)
        return counts

    def __len__(self) -> int:
        return len(self._slides)

    def __getitem__(self, index: int):
        if not 0 <= index < len(self._slides):
            raise IndexError(f"Slide index out of range: {index}")
        return self._slides[index]

    def __iter__(self) -> Iterator:
        return iter(self._slides)

    def contains_index(self, index: int) -> bool:
        return 0 <= index < len(self._slides)

    # -------------------------------------------------------------------------
    # Landmarks
    # -------------------------------------------------------------------------

    @property
    def complete_index(self) -> Optional[int]:
        """Index of the complete slide, or None if the course has none."""
        return self._complete_index

    @property
    def finish_index(self) -> int:
        """Index where the forward control reads 'Finish'."""
        if self._complete_index is not None and self._complete_index > 0:
            return self._complete_index - 1
        return len(self._slides) - 1

    def is_gated(self, index: int) -> bool:
        return self[index].type in GATED_SLIDE_TYPES

    def interaction_slot(self, index: int) -> int:
        """Ordinal of an interactive slide among the course's interactive slides."""
        return sum(
            1 for slide in self._slides[:index]
            if slide.type == SlideType.INTERACTIVE
        )

    # -------------------------------------------------------------------------
    # Progress
    # -------------------------------------------------------------------------

    def is_lesson(self, slide) -> bool:
        return slide.type not in self._non_lesson_types

    @property
    def total_lessons(self) -> int:
        return self._lesson_prefix_counts[-1] if self._lesson_prefix_counts else 0

    def lesson_number(self, index: int) -> int:
        """Number of lesson slides at or before index."""
        return self._lesson_prefix_counts[index]

    def progress(self, index: int) -> ProgressReport:
        """
        Progress indicator for a position.

        Held below 100% until the complete slide is reached, so the bar only
        fills after Finish.
        """
        slide = self[index]
        total = self.total_lessons
        if slide.type == SlideType.INTRO:
            return ProgressReport("Welcome", 0.0, 0, total)
        if slide.type == SlideType.COMPLETE:
            return ProgressReport("Complete", 100.0, total, total)

        number = self.lesson_number(index)
        percent = number * 100 / (total + 1) if total > 0 else 0.0
        return ProgressReport(f"Lesson {number} of {total}", percent, number, total)
