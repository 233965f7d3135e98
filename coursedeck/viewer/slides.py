"""
Slide renderer - HTML for slides, quizzes, progress and completion.

Provides:
- Course CSS
- Slide body rendering (authored markup is trusted, titles are escaped)
- Quiz question rendering
- Progress bar and completion summary rendering
"""

import html
from typing import Optional, Sequence

from coursedeck.schemas import QuizSlide, SlideType


def get_course_css() -> str:
    """Get CSS styles for course display."""
    return """
    <style>
    .slide h2 {
        color: #1565C0;
        margin-bottom: 0.6em;
    }
    .email-mock {
        background: #fafafa;
        border: 1px solid #ddd;
        border-radius: 8px;
        padding: 1em 1.2em;
        margin: 1em 0;
    }
    .flag {
        border-bottom: 2px dotted #e65100;
        cursor: pointer;
    }
    .flag.selected {
        background: #fff3e0;
        border-bottom-style: solid;
    }
    .progress-track {
        background: #e0e0e0;
        border-radius: 6px;
        height: 10px;
        overflow: hidden;
    }
    .progress-fill {
        background: #1976D2;
        height: 100%;
        transition: width 0.3s;
    }
    .progress-label {
        color: #666;
        font-size: 0.9em;
        margin-bottom: 0.3em;
    }
    .question-block {
        background: #e3f2fd;
        border-radius: 12px;
        padding: 1em 1.5em;
        margin: 1em 0;
        border-left: 4px solid #1976D2;
    }
    .question-block h3 {
        color: #1565C0;
        font-size: 1.05em;
        margin: 0 0 0.4em 0;
    }
    .option-label {
        display: block;
        padding: 0.2em 0;
    }
    .results-box {
        background: #e8f5e9;
        border-radius: 8px;
        padding: 1em;
        margin: 1.5em 0;
    }
    </style>
    """


def render_slide_html(slide) -> str:
    """
    Render the body of a slide.

    Authored content is inserted as-is. Slides without content get a
    heading from their title. Quiz and complete slides are built from
    their structured fields instead.
    """
    if slide.type == SlideType.QUIZ:
        return render_quiz_html(slide)
    if slide.content:
        return slide.content
    return f'<div class="slide"><h2>{html.escape(slide.title)}</h2></div>'


def render_quiz_html(
    slide: QuizSlide,
    answers: Optional[Sequence[Optional[int]]] = None,
) -> str:
    """
    Render the quiz intro text and all questions as read-only HTML.

    Args:
        slide: Quiz slide
        answers: Optional selected option index per question, marked as checked
    """
    parts = ['<div class="quiz-container">']
    parts.append(f'<h2>{html.escape(slide.title)}</h2>')
    if slide.content:
        parts.append(slide.content)

    for q_idx, question in enumerate(slide.questions):
        selected = answers[q_idx] if answers is not None and q_idx < len(answers) else None
        parts.append('<div class="question-block">')
        parts.append(f'<h3>Question {q_idx + 1}</h3>')
        parts.append(f'<p>{html.escape(question.prompt)}</p>')
        for opt_idx, option in enumerate(question.options):
            checked = " checked" if selected == opt_idx else ""
            parts.append(
                f'<label class="option-label"><input type="radio" name="question-{q_idx}" '
                f'value="{opt_idx}" disabled{checked} /> {html.escape(option)}</label>'
            )
        parts.append('</div>')

    parts.append('</div>')
    return ''.join(parts)


def render_progress_html(label: str, percent: float) -> str:
    """Render progress label and bar."""
    width = max(0.0, min(100.0, percent))
    return (
        f'<div class="progress-label">{html.escape(label)}</div>'
        f'<div class="progress-track"><div class="progress-fill" style="width: {width:.1f}%"></div></div>'
    )


def render_completion_html(score: str, status_label: str, course_title: str = "this training module") -> str:
    """Render the final results shown on the completion slide."""
    score_text = html.escape(score)
    if score != "N/A":
        score_text += "%"
    return f"""
    <div class="slide" id="completion-slide">
    <h2>Course Complete</h2>
    <p>You have completed {html.escape(course_title)}.</p>
    <div class="results-box" role="group" aria-label="Final results">
        <p><strong>Final Score:</strong> {score_text}</p>
        <p><strong>Status:</strong> {html.escape(status_label)}</p>
    </div>
    <p><strong>You may now close this window.</strong></p>
    </div>
    """
