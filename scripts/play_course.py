#!/usr/bin/env python3
"""
play_course.py - Play a CourseDeck course in the terminal.

Runs the navigator against a console surface. Without --events it reads
commands interactively; with --events it replays a YAML event script and
prints the final tracking record as JSON.

Usage:
  python scripts/play_course.py
  python scripts/play_course.py --course courses/cybersecurity_awareness.yaml
  python scripts/play_course.py --events courses/runs/pass_course.yaml
  python scripts/play_course.py --events run.yaml --verbose

Interactive commands:
  n | next          Next / Finish
  b | back          Back
  f <key>           Select flag <key>
  o <q> <option>    Select option (0-based) for question <q> (0-based)
  s | submit        Submit quiz
  q | quit          Exit
"""

import argparse
import html
import json
import logging
import re
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from dotenv import load_dotenv

load_dotenv(PROJECT_ROOT / ".env")

from coursedeck.classroom import (
    Advance,
    Back,
    FlagSelected,
    Navigator,
    OptionSelected,
    QuizSubmitted,
    SlideCatalog,
    TrackingStore,
    load_course,
    load_events,
)
from coursedeck.schemas import SlideType
from coursedeck.utils import resolve_course_path, setup_logging
from coursedeck.viewer import StatefulSurface

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Console surface
# -----------------------------------------------------------------------------

TAG_RE = re.compile(r"<[^>]+>")
BLANK_LINES_RE = re.compile(r"\n\s*\n+")


def markup_to_text(markup: str) -> str:
    """Strip tags and collapse blank lines for terminal display."""
    text = html.unescape(TAG_RE.sub("", markup))
    lines = [line.strip() for line in text.splitlines()]
    return BLANK_LINES_RE.sub("\n\n", "\n".join(lines)).strip()


class ConsoleSurface(StatefulSurface):
    """StatefulSurface that also prints what it shows."""

    def render_slide(self, slide) -> None:
        super().render_slide(slide)
        print()
        print("=" * 60)
        if slide.type == SlideType.QUIZ:
            print(slide.title)
            if slide.content:
                print(markup_to_text(slide.content))
            for q_idx, question in enumerate(slide.questions):
                print(f"\nQuestion {q_idx} : {question.prompt}")
                for o_idx, option in enumerate(question.options):
                    print(f"  [{o_idx}] {option}")
        elif slide.content:
            print(markup_to_text(slide.content))
        else:
            print(slide.title)
        if slide.type == SlideType.INTERACTIVE:
            print(f"\nFlags: {', '.join(sorted(slide.flag_keys))}")

    def set_progress(self, label: str, percent: float) -> None:
        super().set_progress(label, percent)
        print(f"[{label} - {percent:.0f}%]")

    def show_status(self, message) -> None:
        super().show_status(message)
        if message:
            print(f">> {message}")

    def show_completion_summary(self, score: str, status_label: str) -> None:
        super().show_completion_summary(score, status_label)
        score_text = score if score == "N/A" else f"{score}%"
        print(f"\nFinal Score: {score_text}")
        print(f"Status: {status_label}")


# -----------------------------------------------------------------------------
# Input handling
# -----------------------------------------------------------------------------

def parse_command(line: str):
    """
    Parse one interactive command into an event.

    Returns:
        Event instance, "quit", or None if the command is not understood
    """
    parts = line.strip().split()
    if not parts:
        return None
    cmd = parts[0].lower()

    if cmd in ("q", "quit", "exit"):
        return "quit"
    if cmd in ("n", "next", "finish"):
        return Advance()
    if cmd in ("b", "back"):
        return Back()
    if cmd in ("s", "submit"):
        return QuizSubmitted()
    if cmd in ("f", "flag") and len(parts) == 2:
        return FlagSelected(key=parts[1])
    if cmd in ("o", "option") and len(parts) == 3:
        try:
            return OptionSelected(int(parts[1]), int(parts[2]))
        except ValueError:
            return None
    return None


def describe_controls(surface: StatefulSurface) -> str:
    state = surface.state
    controls = []
    if state.back_enabled:
        controls.append("b=Back")
    if state.next_enabled:
        controls.append(f"n={state.next_label}")
    return ", ".join(controls) if controls else "navigation locked"


def run_interactive(navigator: Navigator, surface: ConsoleSurface) -> None:
    """Read commands from stdin until the course finishes or the user quits."""
    while True:
        if navigator.finished:
            print("\nSession finished.")
            return
        try:
            line = input(f"\n({describe_controls(surface)}) > ")
        except EOFError:
            print()
            return

        event = parse_command(line)
        if event == "quit":
            return
        if event is None:
            print("Unknown command. Try: n, b, f <key>, o <q> <option>, s, q")
            continue
        if not navigator.dispatch(event):
            print("(ignored)")


def run_script(navigator: Navigator, events_path: Path) -> None:
    """Replay a YAML event script."""
    events = load_events(events_path)

    logger.info(f"Replaying {len(events)} events from {events_path}")
    for event in events:
        handled = navigator.dispatch(event)
        logger.debug(f"  {event!r} -> {'handled' if handled else 'ignored'}")


# -----------------------------------------------------------------------------
# Main
# -----------------------------------------------------------------------------

def main():
    parser = argparse.ArgumentParser(
        description="Play a CourseDeck course in the terminal"
    )
    parser.add_argument(
        "--course",
        type=str,
        default=None,
        help="Course name or path to a course YAML file (default: $COURSEDECK_COURSE or bundled course)"
    )
    parser.add_argument(
        "--events",
        type=Path,
        default=None,
        help="YAML event script to replay instead of reading commands"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging"
    )
    args = parser.parse_args()

    setup_logging(verbose=args.verbose)

    course_path = resolve_course_path(args.course)
    try:
        course = load_course(course_path)
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Failed to load course: {e}")
        sys.exit(1)

    logger.info(f"Loaded course '{course.title}' ({len(course.slides)} slides) from {course_path}")

    store = TrackingStore()
    surface = ConsoleSurface()
    navigator = Navigator(SlideCatalog(course), store, surface)
    navigator.start()

    if args.events:
        try:
            run_script(navigator, args.events)
        except (FileNotFoundError, ValueError) as e:
            logger.error(f"Failed to replay events: {e}")
            sys.exit(1)
        print(json.dumps(store.snapshot(), indent=2, sort_keys=True))
    else:
        run_interactive(navigator, surface)


if __name__ == "__main__":
    main()
