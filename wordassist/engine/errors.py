"""
Error taxonomy for the assistant.

- SourceUnavailable : the word list cannot be opened/read (fatal for a session).
- MalformedGuess    : a live guess is not five alphabet letters.
- MalformedFeedback : a feedback string/tuple is not five known replies.

An empty filter result is NOT an error; see engine.session.Status.
"""


class WordAssistError(Exception):
    """Base class for all assistant errors."""


class SourceUnavailable(WordAssistError, OSError):
    """The word-list source could not be read at all."""


class MalformedGuess(WordAssistError, ValueError):
    """A guess is not a valid five-letter alphabet word."""


class MalformedFeedback(WordAssistError, ValueError):
    """Feedback does not describe exactly five known per-letter replies."""
