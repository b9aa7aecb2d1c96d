"""
core.errors
Error taxonomy of the league domain.

All of these are local, recoverable conditions meant to be shown to the
manager as a message. None of them should take the process down.
"""

from __future__ import annotations


class LeagueError(Exception):
    """Base class for every domain error raised by core/content/engine."""


class InvalidStats(LeagueError, ValueError):
    """A stat block is missing an attribute or has one outside 0..100."""


class EmptySquad(LeagueError, ValueError):
    """Aggregate squad power was requested for a squad with no players."""


class InsufficientFunds(LeagueError):
    def __init__(self, required: int, available: int) -> None:
        self.required = int(required)
        self.available = int(available)
        super().__init__(f"insufficient credits: need {self.required}, have {self.available}")


class NotFound(LeagueError, KeyError):
    def __init__(self, player_id: str) -> None:
        self.player_id = str(player_id)
        super().__init__(f"player not in squad: {self.player_id}")

    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0])


class InvalidGeneratedProfile(LeagueError, ValueError):
    """The generation collaborator returned an unusable player profile."""


class InconsistentMatchResult(LeagueError, ValueError):
    """Winner or goal events contradict the scoreline."""


class ProviderError(LeagueError, RuntimeError):
    """Transport or parse failure inside a content provider."""


class OperationInProgress(LeagueError, RuntimeError):
    """A mutating request arrived while another one was still running."""
