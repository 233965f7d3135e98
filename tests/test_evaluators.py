"""
Completion evaluator tests for CourseDeck.

Covers pass-through, interactive flag-selection and quiz gates, and
quiz scoring.
"""

import pytest

from coursedeck.classroom import (
    Advance,
    FlagSelected,
    INCOMPLETE_SUBMISSION_MESSAGE,
    InteractiveEvaluator,
    LearnerRecord,
    OptionSelected,
    PassThroughEvaluator,
    QuizEvaluator,
    QuizSubmitted,
    TrackingStore,
    calculate_quiz_score,
    create_evaluator,
)

from conftest import ACTIVITY, INTRO, LESSON_1, QUIZ


@pytest.fixture
def record() -> LearnerRecord:
    store = TrackingStore()
    store.initialize()
    return LearnerRecord(store)


class TestQuizScoring:
    """Test score calculation and rounding."""

    def test_all_correct(self):
        score = calculate_quiz_score(2, 2)
        assert score.percent == 100
        assert (score.correct, score.total) == (2, 2)

    def test_none_correct(self):
        assert calculate_quiz_score(0, 2).percent == 0

    def test_half_rounds_up(self):
        # 1/8 = 12.5 -> 13, 3/8 = 37.5 -> 38
        assert calculate_quiz_score(1, 8).percent == 13
        assert calculate_quiz_score(3, 8).percent == 38

    def test_rounds_down_below_half(self):
        # 1/3 = 33.33 -> 33, 2/3 = 66.67 -> 67
        assert calculate_quiz_score(1, 3).percent == 33
        assert calculate_quiz_score(2, 3).percent == 67

    def test_zero_questions_rejected(self):
        with pytest.raises(ValueError):
            calculate_quiz_score(0, 0)


class TestPassThroughEvaluator:
    """Test ungated slides."""

    def test_always_satisfied(self, catalog, record):
        evaluator = create_evaluator(catalog[LESSON_1], record)
        assert isinstance(evaluator, PassThroughEvaluator)
        assert not evaluator.gated
        assert evaluator.on_enter() is None
        assert evaluator.is_satisfied()

    def test_ignores_input(self, catalog, record):
        evaluator = create_evaluator(catalog[INTRO], record)
        outcome = evaluator.on_input_event(FlagSelected("sender"))
        assert not outcome.accepted
        assert outcome.satisfied
        assert record.store.snapshot() == {
            "location": "0",
            "score.raw": "0",
            "completion_status": "incomplete",
        }


class TestInteractiveEvaluator:
    """Test flag-selection gate."""

    def _evaluator(self, catalog, record, slot=0) -> InteractiveEvaluator:
        evaluator = create_evaluator(catalog[ACTIVITY], record, interaction_slot=slot)
        evaluator.on_enter()
        return evaluator

    def test_enter_resets_and_locks(self, catalog, record):
        evaluator = create_evaluator(catalog[ACTIVITY], record)
        assert isinstance(evaluator, InteractiveEvaluator)
        assert evaluator.gated
        assert evaluator.on_enter() == "Selected: 0 / 2"
        assert evaluator.selected_keys == set()
        assert not evaluator.is_satisfied()

    def test_duplicate_selection_not_counted(self, catalog, record):
        evaluator = self._evaluator(catalog, record)
        first = evaluator.on_input_event(FlagSelected("sender"))
        second = evaluator.on_input_event(FlagSelected("sender"))
        assert first.accepted
        assert not second.accepted
        assert len(evaluator.selected_keys) == 1
        assert second.message == "Selected: 1 / 2"

    def test_satisfied_matches_threshold(self, catalog, record):
        evaluator = self._evaluator(catalog, record)
        for key in ["sender", "sender", "link", "subject"]:
            evaluator.on_input_event(FlagSelected(key))
            assert evaluator.is_satisfied() == (len(evaluator.selected_keys) >= 2)

    def test_unknown_flag_ignored(self, catalog, record):
        evaluator = self._evaluator(catalog, record)
        outcome = evaluator.on_input_event(FlagSelected("attachment"))
        assert not outcome.accepted
        assert evaluator.selected_keys == set()

    def test_satisfaction_records_interaction_once(self, catalog, record):
        evaluator = self._evaluator(catalog, record)
        evaluator.on_input_event(FlagSelected("sender"))
        assert "interactions.0.id" not in record.store.snapshot()

        outcome = evaluator.on_input_event(FlagSelected("link"))
        assert outcome.newly_satisfied
        assert outcome.message == "Complete: 2 / 2. You may continue."
        snap = record.store.snapshot()
        assert snap["interactions.0.id"] == "phishing-activity"
        assert snap["interactions.0.result"] == "correct"
        commits = len(record.store.commit_log)
        assert commits == 1

        outcome = evaluator.on_input_event(FlagSelected("subject"))
        assert outcome.accepted
        assert not outcome.newly_satisfied
        assert len(record.store.commit_log) == commits

    def test_interaction_slot(self, catalog, record):
        evaluator = self._evaluator(catalog, record, slot=2)
        evaluator.on_input_event(FlagSelected("sender"))
        evaluator.on_input_event(FlagSelected("link"))
        assert record.store.get_value("interactions.2.id") == "phishing-activity"
        assert "interactions.0.id" not in record.store.snapshot()

    def test_ignores_quiz_events(self, catalog, record):
        evaluator = self._evaluator(catalog, record)
        assert not evaluator.on_input_event(QuizSubmitted()).accepted


class TestQuizEvaluator:
    """Test scored-submission gate."""

    def _evaluator(self, catalog, record) -> QuizEvaluator:
        evaluator = create_evaluator(catalog[QUIZ], record)
        evaluator.on_enter()
        return evaluator

    def _answer(self, evaluator, answers):
        for q_idx, o_idx in enumerate(answers):
            evaluator.on_input_event(OptionSelected(q_idx, o_idx))

    def test_enter_resets(self, catalog, record):
        evaluator = self._evaluator(catalog, record)
        assert isinstance(evaluator, QuizEvaluator)
        assert evaluator.gated
        assert evaluator.answers == [None, None]
        assert not evaluator.is_satisfied()

    def test_all_correct_passes(self, catalog, record):
        evaluator = self._evaluator(catalog, record)
        self._answer(evaluator, [1, 3])
        outcome = evaluator.on_input_event(QuizSubmitted())
        assert outcome.accepted
        assert outcome.satisfied
        assert outcome.message == "You passed with a score of 100%. You may continue."
        assert record.store.get_value("score.raw") == "100"
        assert record.store.get_value("success_status") == "passed"
        assert evaluator.is_satisfied()
        assert len(record.store.commit_log) == 1

    def test_all_wrong_fails(self, catalog, record):
        evaluator = self._evaluator(catalog, record)
        self._answer(evaluator, [0, 0])
        outcome = evaluator.on_input_event(QuizSubmitted())
        assert outcome.accepted
        assert not outcome.satisfied
        assert outcome.message == "You scored 0%. Passing score is 80%. Please retry."
        assert record.store.get_value("score.raw") == "0"
        assert record.store.get_value("success_status") == "failed"
        assert not evaluator.is_satisfied()

    def test_half_correct_below_passing(self, catalog, record):
        evaluator = self._evaluator(catalog, record)
        self._answer(evaluator, [1, 0])
        evaluator.on_input_event(QuizSubmitted())
        assert evaluator.last_score.percent == 50
        assert not evaluator.is_satisfied()

    def test_unanswered_submission_rejected(self, catalog, record):
        evaluator = self._evaluator(catalog, record)
        evaluator.on_input_event(OptionSelected(0, 1))
        outcome = evaluator.on_input_event(QuizSubmitted())
        assert not outcome.accepted
        assert outcome.message == INCOMPLETE_SUBMISSION_MESSAGE
        assert evaluator.unanswered() == [1]
        assert record.store.get_value("score.raw") == "0"
        assert "success_status" not in record.store.snapshot()
        assert not record.store.commit_log

    def test_answers_can_change(self, catalog, record):
        evaluator = self._evaluator(catalog, record)
        self._answer(evaluator, [0, 0])
        self._answer(evaluator, [1, 3])
        assert evaluator.answers == [1, 3]

    def test_retry_after_failure(self, catalog, record):
        evaluator = self._evaluator(catalog, record)
        self._answer(evaluator, [0, 0])
        evaluator.on_input_event(QuizSubmitted())
        self._answer(evaluator, [1, 3])
        outcome = evaluator.on_input_event(QuizSubmitted())
        assert outcome.newly_satisfied
        assert record.store.get_value("score.raw") == "100"
        assert record.store.get_value("success_status") == "passed"

    def test_latest_submission_decides(self, catalog, record):
        evaluator = self._evaluator(catalog, record)
        self._answer(evaluator, [1, 3])
        evaluator.on_input_event(QuizSubmitted())
        self._answer(evaluator, [0, 0])
        evaluator.on_input_event(QuizSubmitted())
        assert not evaluator.is_satisfied()
        assert record.store.get_value("success_status") == "failed"

    def test_out_of_range_selection_ignored(self, catalog, record):
        evaluator = self._evaluator(catalog, record)
        assert not evaluator.on_input_event(OptionSelected(5, 0)).accepted
        assert not evaluator.on_input_event(OptionSelected(0, 9)).accepted
        assert not evaluator.on_input_event(OptionSelected(-1, 0)).accepted
        assert evaluator.answers == [None, None]

    def test_ignores_navigation_events(self, catalog, record):
        evaluator = self._evaluator(catalog, record)
        assert not evaluator.on_input_event(Advance()).accepted

    def test_passing_score_zero(self, record):
        from coursedeck.schemas import QuizSlide

        slide = QuizSlide(
            id="easy",
            title="Easy",
            passing_score=0,
            questions=[{"prompt": "?", "options": ["a", "b"], "correct_option_index": 0}],
        )
        evaluator = QuizEvaluator(slide, record)
        evaluator.on_enter()
        evaluator.on_input_event(OptionSelected(0, 1))
        assert evaluator.on_input_event(QuizSubmitted()).satisfied
