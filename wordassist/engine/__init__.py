from .errors import MalformedFeedback, MalformedGuess, SourceUnavailable, WordAssistError
from .word import ALPHABET, WORD_LENGTH, Word
from .feedback import Feedback, Reply, feedback_of, format_pattern, parse_feedback
from .constraints import filter_candidates
from .scoring import letter_counts, ranked, score_word, suggest
from .session import SessionState, Status, advance, start
from .validation import validate_guess

__all__ = [
    "WordAssistError", "SourceUnavailable", "MalformedGuess", "MalformedFeedback",
    "ALPHABET", "WORD_LENGTH", "Word",
    "Feedback", "Reply", "feedback_of", "format_pattern", "parse_feedback",
    "filter_candidates",
    "letter_counts", "ranked", "score_word", "suggest",
    "SessionState", "Status", "advance", "start",
    "validate_guess",
]
