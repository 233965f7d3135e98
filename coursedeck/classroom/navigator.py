"""
Navigator - Slide progression state machine.

Provides:
- Back/Next/Finish transitions with gate checking
- Progress reporting to the presentation surface
- Location, score and completion tracking
- Routing of learner input to the active slide's evaluator
"""

import logging
from dataclasses import dataclass
from typing import Optional

from coursedeck.schemas import CompletionStatus, SlideType

from .catalog import ProgressReport, SlideCatalog
from .evaluators import Evaluator, create_evaluator
from .events import Advance, Back, FlagSelected, OptionSelected, QuizSubmitted
from .tracking import LearnerRecord, TrackingStore


logger = logging.getLogger(__name__)

NEXT_LABEL = "Next"
FINISH_LABEL = "Finish"


@dataclass
class NavigationState:
    """Mutable position state owned by the navigator."""
    current_index: int = 0
    session_active: bool = False
    finished: bool = False


class Navigator:
    """
    Drive a learner through a slide catalog.

    Combines SlideCatalog (content) with TrackingStore (learner record)
    and a presentation surface (display). Every transition is validated
    here; the surface's enabled/disabled buttons are a convenience, not
    the guard.
    """

    def __init__(self, catalog: SlideCatalog, store: TrackingStore, surface):
        """
        Initialize navigator.

        Args:
            catalog: SlideCatalog to navigate
            store: TrackingStore receiving location, score and status
            surface: PresentationSurface to drive
        """
        self.catalog = catalog
        self.store = store
        self.record = LearnerRecord(store)
        self.surface = surface
        self._state = NavigationState()
        self._evaluator: Optional[Evaluator] = None

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def current_index(self) -> int:
        return self._state.current_index

    @property
    def current_slide(self):
        return self.catalog[self._state.current_index]

    @property
    def session_active(self) -> bool:
        return self._state.session_active

    @property
    def finished(self) -> bool:
        return self._state.finished

    @property
    def evaluator(self) -> Optional[Evaluator]:
        return self._evaluator

    @property
    def gate_satisfied(self) -> bool:
        return self._evaluator is None or self._evaluator.is_satisfied()

    @property
    def progress(self) -> ProgressReport:
        return self.catalog.progress(self._state.current_index)

    def can_go_back(self) -> bool:
        index = self._state.current_index
        return (
            self._state.session_active
            and index > 0
            and self.current_slide.type != SlideType.COMPLETE
        )

    def can_advance(self) -> bool:
        return (
            self._state.session_active
            and self.current_slide.type != SlideType.COMPLETE
            and self.gate_satisfied
        )

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def start(self) -> None:
        """Open the tracking session and show the first slide."""
        if self._state.session_active:
            logger.debug("Navigator already started")
            return
        self.store.initialize()
        self._state = NavigationState(current_index=0, session_active=True)
        self._enter(0)

    def _finish_session(self) -> None:
        """Close the tracking session and lock navigation for good."""
        self.store.finish()
        self._state.session_active = False
        self._state.finished = True
        self.surface.set_back_enabled(False)
        self.surface.set_next_enabled(False)
        logger.info("Course finished")

    # -------------------------------------------------------------------------
    # Slide entry
    # -------------------------------------------------------------------------

    def _enter(self, index: int) -> None:
        """Show the slide at index and install its evaluator."""
        slide = self.catalog[index]
        self._state.current_index = index
        is_complete = slide.type == SlideType.COMPLETE
        logger.info(f"Entering slide {index} ({slide.type}): {slide.title}")

        self.surface.render_slide(slide)

        report = self.catalog.progress(index)
        self.surface.set_progress(report.label, report.percent)

        self.surface.set_back_enabled(index > 0 and not is_complete)
        self.surface.set_next_label(FINISH_LABEL if index == self.catalog.finish_index else NEXT_LABEL)
        self.surface.set_next_enabled(not is_complete)

        self.record.set_location(index)
        self.record.commit()

        slot = self.catalog.interaction_slot(index)
        self._evaluator = create_evaluator(slide, self.record, interaction_slot=slot)
        status = self._evaluator.on_enter()
        if self._evaluator.gated:
            self.surface.set_next_enabled(False)
        if status is not None:
            self.surface.show_status(status)

        if is_complete:
            self.record.set_completion_status(CompletionStatus.COMPLETED)
            self.record.commit()
            summary = self.record.summary()
            self.surface.show_completion_summary(summary.score, summary.status_label)

    # -------------------------------------------------------------------------
    # Navigation events
    # -------------------------------------------------------------------------

    def advance(self) -> bool:
        """
        Handle Next / Finish.

        At the finish index this moves to the complete slide (if any) and
        closes the tracking session exactly once.
        """
        if not self.can_advance():
            logger.debug(f"Advance ignored at slide {self._state.current_index}")
            return False

        index = self._state.current_index
        if index < self.catalog.finish_index:
            target = index + 1
            if not self.catalog.contains_index(target):
                logger.warning(f"Advance target {target} out of range")
                return False
            self._enter(target)
            return True

        complete_index = self.catalog.complete_index
        if complete_index is not None and complete_index != index:
            self._enter(complete_index)
        else:
            self.record.set_completion_status(CompletionStatus.COMPLETED)
            self.record.commit()
        self._finish_session()
        return True

    def back(self) -> bool:
        """Handle Back."""
        if not self.can_go_back():
            logger.debug(f"Back ignored at slide {self._state.current_index}")
            return False

        target = self._state.current_index - 1
        if not self.catalog.contains_index(target):
            logger.warning(f"Back target {target} out of range")
            return False
        self._enter(target)
        return True

    # -------------------------------------------------------------------------
    # Gate events
    # -------------------------------------------------------------------------

    def select_flag(self, key: str) -> bool:
        return self._handle_gate_event(FlagSelected(key=key))

    def select_quiz_option(self, question_index: int, option_index: int) -> bool:
        return self._handle_gate_event(OptionSelected(question_index, option_index))

    def submit_quiz(self) -> bool:
        return self._handle_gate_event(QuizSubmitted())

    def _handle_gate_event(self, event) -> bool:
        if not self._state.session_active or self._evaluator is None:
            logger.debug(f"Ignoring {event!r}: session not active")
            return False

        outcome = self._evaluator.on_input_event(event)
        if outcome.message is not None:
            self.surface.show_status(outcome.message)
        if self._evaluator.gated:
            self.surface.set_next_enabled(outcome.satisfied)
        return outcome.accepted

    def dispatch(self, event) -> bool:
        """Route any learner event to its handler."""
        if isinstance(event, Advance):
            return self.advance()
        if isinstance(event, Back):
            return self.back()
        if isinstance(event, FlagSelected):
            return self.select_flag(event.key)
        if isinstance(event, OptionSelected):
            return self.select_quiz_option(event.question_index, event.option_index)
        if isinstance(event, QuizSubmitted):
            return self.submit_quiz()
        raise TypeError(f"Unsupported event: {event!r}")
