"""
Presentation surface contract.

The navigator drives any object implementing PresentationSurface. The
StatefulSurface here keeps the latest value of every affordance so a
host (Streamlit, a terminal, a test) can redraw from it at any time.
"""

from collections import deque
from dataclasses import dataclass, field
from typing import Any, Optional, Protocol


CALL_LOG_LIMIT = 200


class PresentationSurface(Protocol):
    """Outbound calls from the navigator to whatever draws the course."""

    def render_slide(self, slide) -> None: ...

    def set_back_enabled(self, enabled: bool) -> None: ...

    def set_next_enabled(self, enabled: bool) -> None: ...

    def set_next_label(self, label: str) -> None: ...

    def set_progress(self, label: str, percent: float) -> None: ...

    def show_status(self, message: Optional[str]) -> None: ...

    def show_completion_summary(self, score: str, status_label: str) -> None: ...


@dataclass
class SurfaceState:
    """Latest state of every affordance on the surface."""
    slide: Any = None
    back_enabled: bool = False
    next_enabled: bool = False
    next_label: str = "Next"
    progress_label: str = ""
    progress_percent: float = 0.0
    status: Optional[str] = None
    summary: Optional[tuple[str, str]] = None


@dataclass
class StatefulSurface:
    """
    Headless surface that records state and an ordered call log.

    Rendering a new slide clears the status line and completion summary.
    """
    state: SurfaceState = field(default_factory=SurfaceState)
    calls: deque[tuple[str, tuple]] = field(default_factory=lambda: deque(maxlen=CALL_LOG_LIMIT))

    def _log(self, name: str, *args) -> None:
        self.calls.append((name, args))

    def render_slide(self, slide) -> None:
        self._log("render_slide", slide)
        self.state.slide = slide
        self.state.status = None
        self.state.summary = None

    def set_back_enabled(self, enabled: bool) -> None:
        self._log("set_back_enabled", enabled)
        self.state.back_enabled = enabled

    def set_next_enabled(self, enabled: bool) -> None:
        self._log("set_next_enabled", enabled)
        self.state.next_enabled = enabled

    def set_next_label(self, label: str) -> None:
        self._log("set_next_label", label)
        self.state.next_label = label

    def set_progress(self, label: str, percent: float) -> None:
        self._log("set_progress", label, percent)
        self.state.progress_label = label
        self.state.progress_percent = percent

    def show_status(self, message: Optional[str]) -> None:
        self._log("show_status", message)
        self.state.status = message

    def show_completion_summary(self, score: str, status_label: str) -> None:
        self._log("show_completion_summary", score, status_label)
        self.state.summary = (score, status_label)

    def call_names(self) -> list[str]:
        return [name for name, _ in self.calls]
