"""
CourseDeck - Gated Slide Course Player

Streamlit application that plays a slide course, gates progress behind
activities and quizzes, and reports to a SCORM-style tracking record.

Usage:
    streamlit run app.py
"""

import json
import logging
from pathlib import Path

import streamlit as st
from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).parent
load_dotenv(PROJECT_ROOT / ".env")

from coursedeck.classroom import (
    Navigator,
    QuizEvaluator,
    SlideCatalog,
    TrackingStore,
    load_course,
)
from coursedeck.schemas import SlideType
from coursedeck.utils import resolve_course_path, setup_logging
from coursedeck.viewer import (
    StatefulSurface,
    get_course_css,
    render_completion_html,
    render_progress_html,
    render_slide_html,
)


# -----------------------------------------------------------------------------
# Configuration
# -----------------------------------------------------------------------------

setup_logging()
logger = logging.getLogger(__name__)

st.set_page_config(
    page_title="CourseDeck",
    page_icon="🎓",
    layout="centered",
    initial_sidebar_state="expanded",
)


# -----------------------------------------------------------------------------
# Session State Initialization
# -----------------------------------------------------------------------------

def init_session_state():
    """Initialize session state variables."""
    if "course_error" not in st.session_state:
        st.session_state.course_error = None

    if "navigator" not in st.session_state:
        course_path = resolve_course_path()
        try:
            course = load_course(course_path)
        except (FileNotFoundError, ValueError) as e:
            logger.error(f"Failed to load course {course_path}: {e}")
            st.session_state.course_error = str(e)
            st.session_state.navigator = None
            return

        st.session_state.course = course
        st.session_state.store = TrackingStore()
        st.session_state.surface = StatefulSurface()
        st.session_state.navigator = Navigator(
            SlideCatalog(course),
            st.session_state.store,
            st.session_state.surface,
        )
        st.session_state.navigator.start()


def restart_course():
    """Drop the current run so the next rerun starts a fresh session."""
    for key in ("navigator", "store", "surface", "course"):
        st.session_state.pop(key, None)
    st.rerun()


# -----------------------------------------------------------------------------
# Sidebar: Tracking Record
# -----------------------------------------------------------------------------

def render_sidebar():
    """Render the sidebar with the live tracking record."""
    st.sidebar.title("🎓 CourseDeck")

    if not st.session_state.navigator:
        return

    course = st.session_state.course
    store = st.session_state.store

    st.sidebar.markdown(f"**{course.title}**")
    if course.description:
        st.sidebar.caption(course.description)

    st.sidebar.divider()
    st.sidebar.subheader("Tracking Record")
    st.sidebar.markdown("Session: " + ("active" if store.is_active else "closed"))
    st.sidebar.code(json.dumps(store.snapshot(), indent=2, sort_keys=True), language="json")
    st.sidebar.caption(f"{store.commit_count} commits")

    st.sidebar.divider()
    if st.sidebar.button("Restart course", use_container_width=True):
        restart_course()


# -----------------------------------------------------------------------------
# Main Content: Slide View
# -----------------------------------------------------------------------------

def render_slide_view():
    """Render progress, the current slide and the navigation bar."""
    if not st.session_state.navigator:
        st.error(f"Course could not be loaded: {st.session_state.course_error}")
        return

    nav = st.session_state.navigator
    state = st.session_state.surface.state
    slide = state.slide

    st.markdown(get_course_css(), unsafe_allow_html=True)
    st.markdown(render_progress_html(state.progress_label, state.progress_percent), unsafe_allow_html=True)
    st.divider()

    if slide.type == SlideType.COMPLETE and state.summary:
        score, status_label = state.summary
        st.markdown(
            render_completion_html(score, status_label, st.session_state.course.title),
            unsafe_allow_html=True,
        )
    elif slide.type == SlideType.QUIZ:
        render_quiz_section(nav, slide)
    else:
        st.markdown(render_slide_html(slide), unsafe_allow_html=True)

    if slide.type == SlideType.INTERACTIVE:
        render_flag_section(nav, slide)

    if state.status:
        if nav.gate_satisfied:
            st.success(state.status)
        else:
            st.info(state.status)

    render_navigation_bar(nav)


def render_flag_section(nav: Navigator, slide):
    """Render one toggle button per markable flag."""
    selected = nav.evaluator.selected_keys
    cols = st.columns(len(slide.flag_keys))
    for col, key in zip(cols, sorted(slide.flag_keys)):
        with col:
            label = f"✓ {key}" if key in selected else f"Flag: {key}"
            if st.button(label, key=f"flag_{slide.id}_{key}", disabled=key in selected, use_container_width=True):
                nav.select_flag(key)
                st.rerun()


def render_quiz_section(nav: Navigator, slide):
    """Render quiz questions with radio options and a submit button."""
    evaluator = nav.evaluator
    if not isinstance(evaluator, QuizEvaluator):
        return

    st.subheader(slide.title)
    if slide.content:
        st.markdown(slide.content, unsafe_allow_html=True)
    for q_idx, question in enumerate(slide.questions):
        st.markdown(f"**Question {q_idx + 1}**")
        choice = st.radio(
            question.prompt,
            options=list(range(len(question.options))),
            format_func=lambda idx, q=question: q.options[idx],
            index=evaluator.answers[q_idx],
            key=f"quiz_{slide.id}_{q_idx}_{id(evaluator)}",
        )
        if choice is not None and choice != evaluator.answers[q_idx]:
            nav.select_quiz_option(q_idx, choice)

    if st.button("Submit Quiz", type="primary"):
        nav.submit_quiz()
        st.rerun()


def render_navigation_bar(nav: Navigator):
    """Render Back and Next/Finish buttons from the surface state."""
    state = st.session_state.surface.state
    st.divider()

    col1, col2, col3 = st.columns([1, 2, 1])

    with col1:
        if st.button("← Back", disabled=not state.back_enabled, use_container_width=True):
            nav.back()
            st.rerun()

    with col2:
        st.markdown(f"<center>{state.progress_label}</center>", unsafe_allow_html=True)

    with col3:
        if st.button(f"{state.next_label} →", disabled=not state.next_enabled, use_container_width=True):
            nav.advance()
            st.rerun()


# -----------------------------------------------------------------------------
# Main App
# -----------------------------------------------------------------------------

def main():
    """Main application entry point."""
    init_session_state()
    render_sidebar()
    render_slide_view()


if __name__ == "__main__":
    main()
