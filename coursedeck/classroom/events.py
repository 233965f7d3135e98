"""
Inbound learner events.

Each input a presentation surface can report maps to exactly one event
type. Event scripts (YAML lists) are parsed into these for replay.
"""

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class Advance:
    """Next / Finish pressed."""


@dataclass(frozen=True)
class Back:
    """Back pressed."""


@dataclass(frozen=True)
class FlagSelected:
    key: str


@dataclass(frozen=True)
class OptionSelected:
    question_index: int
    option_index: int


@dataclass(frozen=True)
class QuizSubmitted:
    """Quiz submit pressed."""


LearnerEvent = Union[Advance, Back, FlagSelected, OptionSelected, QuizSubmitted]

_BARE_EVENTS = {
    "advance": Advance,
    "next": Advance,
    "finish": Advance,
    "back": Back,
    "submit": QuizSubmitted,
}


def parse_event(raw: Any) -> LearnerEvent:
    """
    Parse one event script entry.

    Accepted forms:
        "advance" | "next" | "finish" | "back" | "submit"
        {"flag": "<key>"}
        {"option": [<question_index>, <option_index>]}

    Raises:
        ValueError: If the entry is not a recognized event
    """
    if isinstance(raw, str):
        event_cls = _BARE_EVENTS.get(raw.strip().lower())
        if event_cls is None:
            raise ValueError(f"Unknown event: {raw!r}")
        return event_cls()

    if isinstance(raw, dict) and len(raw) == 1:
        (name, value), = raw.items()
        if name == "flag":
            return FlagSelected(key=str(value))
        if name == "option":
            if not isinstance(value, (list, tuple)) or len(value) != 2:
                raise ValueError(f"Option event needs [question, option], got {value!r}")
            return OptionSelected(question_index=int(value[0]), option_index=int(value[1]))

    raise ValueError(f"Unknown event: {raw!r}")


def parse_events(raw_events: Any) -> list[LearnerEvent]:
    """Parse a list of event script entries."""
    if not isinstance(raw_events, list):
        raise ValueError("Event script must be a list")
    return [parse_event(item) for item in raw_events]
