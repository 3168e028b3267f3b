"""
Builder for configuring and creating prefix classifiers.
"""

from collections.abc import Iterable
from typing import Optional

from prompter.classifier import PrefixClassifier
from prompter.config import ClassifierConfig
from prompter.types import (
    CommandHandler,
    LogHandler,
    SuggestionHandler,
    DEFAULT_COMMAND_PREFIXES,
)


class ClassifierBuilder:
    """Collects classifier settings; every ``build()`` returns a new classifier."""

    def __init__(self):
        self._command_prefixes: frozenset[str] = DEFAULT_COMMAND_PREFIXES
        self._log_handler: Optional[LogHandler] = None
        self._command_handler: Optional[CommandHandler] = None
        self._suggestion_handler: Optional[SuggestionHandler] = None

    @classmethod
    def from_config(cls, config: ClassifierConfig) -> "ClassifierBuilder":
        """Create a builder seeded with the prefixes from ``config``."""
        return cls().with_prefixes(config.command_prefixes)

    def with_prefixes(self, prefixes: Iterable[str]) -> "ClassifierBuilder":
        self._command_prefixes = frozenset(prefixes)
        return self

    def with_log_handler(self, handler: Optional[LogHandler]) -> "ClassifierBuilder":
        self._log_handler = handler
        return self

    def with_command_handler(self, handler: Optional[CommandHandler]) -> "ClassifierBuilder":
        """Register the command handler. Without one, evaluation stops after trimming."""
        self._command_handler = handler
        return self

    def with_suggestion_handler(self, handler: Optional[SuggestionHandler]) -> "ClassifierBuilder":
        self._suggestion_handler = handler
        return self

    def build(self) -> PrefixClassifier:
        return PrefixClassifier(
            command_prefixes=self._command_prefixes,
            on_log=self._log_handler,
            on_command_state_change=self._command_handler,
            on_suggestion_state_change=self._suggestion_handler,
        )
