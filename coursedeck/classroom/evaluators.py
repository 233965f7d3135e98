"""
Completion evaluators - Per-slide gate logic.

Provides:
- Pass-through gates for intro, content and complete slides
- Flag-selection gate for interactive slides
- Scored-submission gate for quiz slides
- Quiz scoring

An evaluator lives exactly as long as one visit to its slide; the
navigator builds a fresh one on every entry.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from coursedeck.schemas import InteractiveSlide, QuizSlide, SlideType

from .events import FlagSelected, OptionSelected, QuizSubmitted
from .tracking import LearnerRecord


logger = logging.getLogger(__name__)

INCOMPLETE_SUBMISSION_MESSAGE = "Please answer all questions before submitting."


@dataclass(frozen=True)
class EvaluationOutcome:
    """Result of feeding one input event to an evaluator."""
    accepted: bool
    satisfied: bool
    message: Optional[str] = None
    newly_satisfied: bool = False


@dataclass(frozen=True)
class QuizScore:
    """Quiz score with metadata."""
    correct: int
    total: int
    percent: int


def calculate_quiz_score(correct_count: int, total: int) -> QuizScore:
    """
    Calculate quiz score as a whole percentage.

    Rounds half up (37.5 -> 38), computed on integers to avoid
    float artefacts.
    """
    if total <= 0:
        raise ValueError("Quiz must have at least one question")
    percent = (200 * correct_count + total) // (2 * total)
    return QuizScore(correct=correct_count, total=total, percent=percent)


class Evaluator:
    """Base gate: always satisfied, ignores input."""

    gated = False

    def __init__(self, slide, record: LearnerRecord):
        self.slide = slide
        self.record = record

    def on_enter(self) -> Optional[str]:
        """Reset gate state. Returns an initial status message, if any."""
        return None

    def on_input_event(self, event) -> EvaluationOutcome:
        logger.debug(f"Ignoring {event!r} on {self.slide.type} slide")
        return EvaluationOutcome(accepted=False, satisfied=self.is_satisfied())

    def is_satisfied(self) -> bool:
        return True


class PassThroughEvaluator(Evaluator):
    """Intro, content and complete slides have no gate."""


class InteractiveEvaluator(Evaluator):
    """
    Satisfied once `required_selections` distinct flags have been selected.

    On the transition to satisfied, records the interaction in the
    tracking store and commits.
    """

    gated = True

    def __init__(self, slide: InteractiveSlide, record: LearnerRecord, interaction_slot: int = 0):
        super().__init__(slide, record)
        self.interaction_slot = interaction_slot
        self.selected_keys: set[str] = set()

    @property
    def required(self) -> int:
        return self.slide.required_selections

    def on_enter(self) -> Optional[str]:
        self.selected_keys = set()
        return self.status_message()

    def is_satisfied(self) -> bool:
        return len(self.selected_keys) >= self.required

    def status_message(self) -> str:
        count = len(self.selected_keys)
        if self.is_satisfied():
            return f"Complete: {count} / {self.required}. You may continue."
        return f"Selected: {count} / {self.required}"

    def on_input_event(self, event) -> EvaluationOutcome:
        if not isinstance(event, FlagSelected):
            return super().on_input_event(event)
        return self.select(event.key)

    def select(self, key: str) -> EvaluationOutcome:
        """Mark one flag. Selecting the same flag twice counts once."""
        if key not in self.slide.flag_keys:
            logger.warning(f"Unknown flag '{key}' on interactive slide '{self.slide.id}'")
            return EvaluationOutcome(accepted=False, satisfied=self.is_satisfied(), message=self.status_message())

        if key in self.selected_keys:
            return EvaluationOutcome(accepted=False, satisfied=self.is_satisfied(), message=self.status_message())

        was_satisfied = self.is_satisfied()
        self.selected_keys.add(key)
        newly_satisfied = not was_satisfied and self.is_satisfied()

        if newly_satisfied:
            self.record.record_interaction(self.interaction_slot, self.slide.id)
            self.record.commit()

        return EvaluationOutcome(
            accepted=True,
            satisfied=self.is_satisfied(),
            message=self.status_message(),
            newly_satisfied=newly_satisfied,
        )


class QuizEvaluator(Evaluator):
    """
    Satisfied when the latest complete submission scores at or above the
    passing score. Answers can be changed and resubmitted without limit.
    """

    gated = True

    def __init__(self, slide: QuizSlide, record: LearnerRecord):
        super().__init__(slide, record)
        self.answers: list[Optional[int]] = [None] * len(slide.questions)
        self.last_score: Optional[QuizScore] = None
        self._passed = False

    def on_enter(self) -> Optional[str]:
        self.answers = [None] * len(self.slide.questions)
        self.last_score = None
        self._passed = False
        return None

    def is_satisfied(self) -> bool:
        return self._passed

    def on_input_event(self, event) -> EvaluationOutcome:
        if isinstance(event, OptionSelected):
            return self.select_option(event.question_index, event.option_index)
        if isinstance(event, QuizSubmitted):
            return self.submit()
        return super().on_input_event(event)

    def select_option(self, question_index: int, option_index: int) -> EvaluationOutcome:
        """Record an answer, replacing any earlier answer to the same question."""
        questions = self.slide.questions
        if not 0 <= question_index < len(questions):
            logger.warning(f"Question index {question_index} out of range on quiz '{self.slide.id}'")
            return EvaluationOutcome(accepted=False, satisfied=self.is_satisfied())
        if not 0 <= option_index < len(questions[question_index].options):
            logger.warning(
                f"Option index {option_index} out of range for question {question_index} "
                f"on quiz '{self.slide.id}'"
            )
            return EvaluationOutcome(accepted=False, satisfied=self.is_satisfied())

        self.answers[question_index] = option_index
        return EvaluationOutcome(accepted=True, satisfied=self.is_satisfied())

    def unanswered(self) -> list[int]:
        return [idx for idx, answer in enumerate(self.answers) if answer is None]

    def submit(self) -> EvaluationOutcome:
        """Grade the quiz and report score and pass/fail to the tracking store."""
        if self.unanswered():
            return EvaluationOutcome(
                accepted=False,
                satisfied=self.is_satisfied(),
                message=INCOMPLETE_SUBMISSION_MESSAGE,
            )

        correct = sum(
            1 for question, answer in zip(self.slide.questions, self.answers)
            if answer == question.correct_option_index
        )
        score = calculate_quiz_score(correct, len(self.slide.questions))
        passed = score.percent >= self.slide.passing_score

        self.record.set_score(score.percent)
        self.record.set_success_status(passed)
        self.record.commit()

        was_satisfied = self._passed
        self.last_score = score
        self._passed = passed

        if passed:
            message = f"You passed with a score of {score.percent}%. You may continue."
        else:
            message = (
                f"You scored {score.percent}%. Passing score is "
                f"{self.slide.passing_score}%. Please retry."
            )
        return EvaluationOutcome(
            accepted=True,
            satisfied=passed,
            message=message,
            newly_satisfied=passed and not was_satisfied,
        )


def create_evaluator(slide, record: LearnerRecord, interaction_slot: int = 0) -> Evaluator:
    """Build the evaluator matching a slide's type."""
    if slide.type == SlideType.INTERACTIVE:
        return InteractiveEvaluator(slide, record, interaction_slot)
    if slide.type == SlideType.QUIZ:
        return QuizEvaluator(slide, record)
    return PassThroughEvaluator(slide, record)
