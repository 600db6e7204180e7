from __future__ import annotations


class DrawEngineError(Exception):
    """Base class for draw engine failures."""


class InvalidState(DrawEngineError):
    """Raised when an operation is attempted in an incompatible engine state."""


class MissingParticipant(DrawEngineError):
    """A winner name could not be matched back to a known participant."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Winner {name!r} does not match any participant")
        self.name = name


class FormattingFailure(DrawEngineError):
    """Amount could not be rendered; handled inside the payout formatter."""


class InvalidAngle(DrawEngineError, ValueError):
    """A resting angle was NaN or infinite."""
