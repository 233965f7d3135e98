"""
Slide and course schemas for CourseDeck.

Defines Pydantic models for course content including:
- Slide types (intro, content, interactive, quiz, complete)
- Quiz questions
- The course document with catalog invariants
"""

from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class SlideType(str, Enum):
    INTRO = "intro"
    CONTENT = "content"
    INTERACTIVE = "interactive"
    QUIZ = "quiz"
    COMPLETE = "complete"


# -----------------------------------------------------------------------------
# Slide types
# -----------------------------------------------------------------------------

class SlideBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: str
    title: str
    content: str = ""  # opaque renderable markup


class IntroSlide(SlideBase):
    type: Literal["intro"] = "intro"


class ContentSlide(SlideBase):
    type: Literal["content"] = "content"


class InteractiveSlide(SlideBase):
    """
    Flag-selection activity. The learner marks suspicious elements embedded
    in the content; each element is identified by one of `flag_keys`.
    """
    type: Literal["interactive"] = "interactive"
    id: str
    required_selections: int = Field(default=2, ge=1)
    flag_keys: frozenset[str] = Field(..., min_length=1)

    @model_validator(mode="after")
    def check_reachable(self) -> "InteractiveSlide":
        if self.required_selections > len(self.flag_keys):
            raise ValueError(
                f"Interactive slide '{self.id}' requires {self.required_selections} "
                f"selections but only has {len(self.flag_keys)} flags"
            )
        return self


class QuizQuestion(BaseModel):
    model_config = ConfigDict(frozen=True)

    prompt: str
    options: tuple[str, ...] = Field(..., min_length=2)
    correct_option_index: int = Field(..., ge=0)

    @model_validator(mode="after")
    def check_correct_index(self) -> "QuizQuestion":
        if self.correct_option_index >= len(self.options):
            raise ValueError(
                f"correct_option_index {self.correct_option_index} out of range "
                f"for {len(self.options)} options"
            )
        return self


class QuizSlide(SlideBase):
    type: Literal["quiz"] = "quiz"
    id: str
    passing_score: int = Field(..., ge=0, le=100)
    questions: tuple[QuizQuestion, ...] = Field(..., min_length=1)


class CompleteSlide(SlideBase):
    type: Literal["complete"] = "complete"
    id: Optional[str] = None


Slide = Annotated[
    Union[
        IntroSlide,
        ContentSlide,
        InteractiveSlide,
        QuizSlide,
        CompleteSlide,
    ],
    Field(discriminator="type"),
]

GATED_SLIDE_TYPES = frozenset({SlideType.INTERACTIVE.value, SlideType.QUIZ.value})


# -----------------------------------------------------------------------------
# Course document
# -----------------------------------------------------------------------------

class Course(BaseModel):
    """
    A complete course: an ordered, immutable sequence of slides.

    At most one slide may be of type `complete`, and it must be the last one.
    """
    model_config = ConfigDict(frozen=True)

    course_id: str
    title: str
    description: str = ""
    slides: tuple[Slide, ...] = Field(..., min_length=1)

    @field_validator("slides")
    @classmethod
    def check_complete_slide(cls, slides: tuple) -> tuple:
        complete_positions = [
            idx for idx, slide in enumerate(slides)
            if slide.type == SlideType.COMPLETE
        ]
        if len(complete_positions) > 1:
            raise ValueError(f"Course has {len(complete_positions)} complete slides; at most one allowed")
        if complete_positions and complete_positions[0] != len(slides) - 1:
            raise ValueError("The complete slide must be the last slide")
        return slides

    @model_validator(mode="after")
    def check_unique_ids(self) -> "Course":
        seen: set[str] = set()
        for slide in self.slides:
            slide_id = getattr(slide, "id", None)
            if slide_id is None:
                continue
            if slide_id in seen:
                raise ValueError(f"Duplicate slide id: {slide_id}")
            seen.add(slide_id)
        return self
