"""
Terminal host: feeds lines from a text stream into a classifier.
"""

import argparse
import logging
import sys
from collections import Counter
from typing import Optional, TextIO

from prompter.builder import ClassifierBuilder
from prompter.classifier import PrefixClassifier, trim
from prompter.config import load_config
from prompter.types import EvaluationOutcome

logger = logging.getLogger(__name__)


def run_console(
    classifier: PrefixClassifier,
    stream: Optional[TextIO] = None,
    out: Optional[TextIO] = None,
) -> Counter:
    """
    Evaluate every line of ``stream`` until EOF.

    Args:
        classifier: Classifier to feed
        stream: Input lines (default: stdin)
        out: Where detected commands are echoed (default: stdout)

    Returns:
        Counter of EvaluationOutcome values seen
    """
    stream = stream or sys.stdin
    out = out or sys.stdout
    counts: Counter = Counter()

    for line in stream:
        line = line.rstrip("\r\n")
        outcome = classifier.evaluate(line)
        counts[outcome] += 1
        if outcome is EvaluationOutcome.COMMAND_DETECTED:
            out.write(f"[COMMAND] {trim(line)}\n")
            out.flush()

    logger.info(f"Console input closed after {sum(counts.values())} lines")
    return counts


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Read lines from stdin and report the ones that are commands",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m prompter.console
  python -m prompter.console --prefixes '/!'
  cat transcript.txt | python -m prompter.console --verbose
        """
    )
    parser.add_argument(
        "--prefixes",
        help="Command prefix characters (default: PROMPTER_COMMAND_PREFIXES or ':')"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log every detected command"
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    config = load_config()
    if args.prefixes:
        config.command_prefixes = args.prefixes

    logging.basicConfig(level="DEBUG" if args.verbose else config.log_level)

    classifier = (
        ClassifierBuilder.from_config(config)
        .with_log_handler(logger.debug)
        .with_command_handler(lambda started: None)
        .build()
    )
    run_console(classifier)
    return 0


if __name__ == "__main__":
    sys.exit(main())
