"""Shared fixtures for CourseDeck tests."""

import pytest

from coursedeck.classroom import Navigator, SlideCatalog, TrackingStore
from coursedeck.schemas import Course
from coursedeck.viewer import StatefulSurface


SAMPLE_SLIDES = [
    {"type": "intro", "title": "Welcome", "content": "<p>Welcome</p>"},
    {"type": "content", "title": "Lesson 1: Phishing Basics", "content": "<p>Phishing</p>"},
    {
        "type": "interactive",
        "id": "phishing-activity",
        "title": "Lesson 1: Identify Phishing Red Flags",
        "required_selections": 2,
        "flag_keys": ["sender", "link", "subject"],
        "content": '<span class="flag" data-flag="sender">sender</span>',
    },
    {"type": "content", "title": "Lesson 2: Password Safety", "content": "<p>Passwords</p>"},
    {
        "type": "quiz",
        "id": "final-quiz",
        "title": "Final Assessment",
        "passing_score": 80,
        "questions": [
            {
                "prompt": "Which of the following is a sign of phishing?",
                "options": ["Known manager", "Urgent password request", "Newsletter", "Reminder"],
                "correct_option_index": 1,
            },
            {
                "prompt": "Which password is strongest?",
                "options": ["password123", "Company2024", "P@ssword!", "BlueTiger$River92"],
                "correct_option_index": 3,
            },
        ],
    },
    {"type": "complete", "id": "course-complete", "title": "Completion"},
]

INTRO, LESSON_1, ACTIVITY, LESSON_2, QUIZ, COMPLETE = range(6)


def make_course(slides, course_id="test-course") -> Course:
    return Course.model_validate({"course_id": course_id, "title": "Test Course", "slides": slides})


@pytest.fixture
def sample_course() -> Course:
    return make_course(SAMPLE_SLIDES)


@pytest.fixture
def catalog(sample_course) -> SlideCatalog:
    return SlideCatalog(sample_course)


@pytest.fixture
def store() -> TrackingStore:
    return TrackingStore()


@pytest.fixture
def surface() -> StatefulSurface:
    return StatefulSurface()


@pytest.fixture
def navigator(catalog, store, surface) -> Navigator:
    nav = Navigator(catalog, store, surface)
    nav.start()
    return nav
