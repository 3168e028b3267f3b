"""
Prefix classifier: decides whether an input line is a command.
"""

import logging
import threading
import unicodedata
from collections.abc import Iterable
from typing import Optional

from prompter.types import (
    CommandHandler,
    LogHandler,
    SuggestionHandler,
    EvaluationOutcome,
    COMMAND_FOUND_MESSAGE,
    DEFAULT_COMMAND_PREFIXES,
)

logger = logging.getLogger(__name__)

# Horizontal whitespace only: tab plus the Unicode space separators (Zs).
# Line breaks are not trimmed, so "\n:foo" is not a command.
WHITESPACE = (
    "\t \u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u202f\u205f\u3000"
)

ZERO_WIDTH_JOINER = "\u200d"


def trim(text: str) -> str:
    """Strip leading/trailing tabs and space separators."""
    return text.strip(WHITESPACE)


def first_grapheme(text: str) -> str:
    """
    Return the first user-perceived character of ``text``.

    A base character followed by combining marks (and joiner sequences)
    counts as one character, so ":\\u0301" is not a bare ':'.
    """
    end = 1
    while end < len(text):
        char = text[end]
        if unicodedata.category(char) in ("Mn", "Mc", "Me") or char == ZERO_WIDTH_JOINER:
            end += 2 if char == ZERO_WIDTH_JOINER else 1
        else:
            break
    return text[:end]


class PrefixClassifier:
    """Classify input lines by their first non-whitespace character.

    Instances are normally created through ``ClassifierBuilder``.
    """

    def __init__(
        self,
        command_prefixes: Iterable[str] = DEFAULT_COMMAND_PREFIXES,
        on_log: Optional[LogHandler] = None,
        on_command_state_change: Optional[CommandHandler] = None,
        on_suggestion_state_change: Optional[SuggestionHandler] = None,
    ):
        self._command_prefixes = frozenset(command_prefixes)
        self._in_command_mode = False
        self._lock = threading.Lock()
        self._on_log = on_log
        self._on_command_state_change = on_command_state_change
        # Stored only, nothing drives suggestions yet
        self._on_suggestion_state_change = on_suggestion_state_change

    @property
    def command_prefixes(self) -> frozenset[str]:
        return self._command_prefixes

    @property
    def in_command_mode(self) -> bool:
        return self._in_command_mode

    @property
    def on_log(self) -> Optional[LogHandler]:
        return self._on_log

    @property
    def on_command_state_change(self) -> Optional[CommandHandler]:
        return self._on_command_state_change

    @property
    def on_suggestion_state_change(self) -> Optional[SuggestionHandler]:
        return self._on_suggestion_state_change

    def evaluate(self, text: str) -> EvaluationOutcome:
        """
        Inspect an input line and fire the matching callbacks.

        Args:
            text: Raw input line, surrounding tabs and spaces are ignored

        Returns:
            EvaluationOutcome describing what was found

        Example:
            ":help me" -> COMMAND_DETECTED (log handler gets "Command found")
            "hello"    -> NO_MATCH
            "   "      -> EMPTY
        """
        trimmed = trim(text)
        if not trimmed:
            return EvaluationOutcome.EMPTY

        # Nobody to tell about command mode, skip the prefix check entirely
        if self._on_command_state_change is None:
            return EvaluationOutcome.DISABLED

        head = first_grapheme(trimmed)
        if head not in self._command_prefixes:
            with self._lock:
                self._reset_command_mode()
            return EvaluationOutcome.NO_MATCH

        if self._on_log is not None:
            self._on_log(COMMAND_FOUND_MESSAGE)
        logger.debug(f"Command prefix '{head}' found in: {trimmed}")

        with self._lock:
            self._set_command_mode()
            words = trimmed.split(" ")
            # Always true for a non-empty line, so command mode never outlives the call
            if len(words) > 0:
                self._reset_command_mode()

        return EvaluationOutcome.COMMAND_DETECTED

    def _set_command_mode(self) -> None:
        self._in_command_mode = True

    def _reset_command_mode(self) -> None:
        self._in_command_mode = False
