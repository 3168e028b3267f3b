"""
Callback signatures and outcome values shared by the classifier and its hosts.
"""

from collections.abc import Callable
from enum import Enum


# Called with a diagnostic message
LogHandler = Callable[[str], None]

# Called with whether command mode started or stopped
CommandHandler = Callable[[bool], None]

# Called with whether suggestion mode started or stopped
SuggestionHandler = Callable[[bool], None]

COMMAND_FOUND_MESSAGE = "Command found"

DEFAULT_COMMAND_PREFIXES = frozenset({":"})


class EvaluationOutcome(str, Enum):
    """Result of evaluating a single input line."""
    EMPTY = "empty"
    DISABLED = "disabled"  # no command handler registered
    NO_MATCH = "no_match"
    COMMAND_DETECTED = "command_detected"
