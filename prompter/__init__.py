"""
Command prefix detection for chat-style input lines.
Provides the prefix classifier, its builder, and host helpers.
"""

from prompter.types import EvaluationOutcome, COMMAND_FOUND_MESSAGE
from prompter.classifier import PrefixClassifier
from prompter.builder import ClassifierBuilder
from prompter.config import ClassifierConfig, load_config

__all__ = [
    'PrefixClassifier',
    'ClassifierBuilder',
    'ClassifierConfig',
    'EvaluationOutcome',
    'COMMAND_FOUND_MESSAGE',
    'load_config',
]
