"""CourseDeck - Gated slide course player with SCORM-style tracking."""

__version__ = "0.1.0"
