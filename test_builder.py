"""
Tests for ClassifierBuilder.
"""

from prompter import ClassifierBuilder, ClassifierConfig, EvaluationOutcome


def test_methods_chain():
    builder = ClassifierBuilder()
    assert builder.with_log_handler(print) is builder
    assert builder.with_command_handler(print) is builder
    assert builder.with_suggestion_handler(print) is builder
    assert builder.with_prefixes(":") is builder


def test_build_returns_fresh_instances():
    builder = ClassifierBuilder().with_command_handler(lambda started: None)
    first = builder.build()
    second = builder.build()

    assert first is not second
    assert first.command_prefixes == second.command_prefixes


def test_later_configuration_does_not_touch_built_classifier():
    logs: list[str] = []
    builder = ClassifierBuilder().with_command_handler(lambda started: None)
    silent = builder.build()
    builder.with_log_handler(logs.append)
    loud = builder.build()

    silent.evaluate(":a")
    assert logs == []
    loud.evaluate(":a")
    assert logs == ["Command found"]


def test_last_registration_wins():
    first: list[str] = []
    second: list[str] = []
    classifier = (
        ClassifierBuilder()
        .with_log_handler(first.append)
        .with_log_handler(second.append)
        .with_command_handler(lambda started: None)
        .build()
    )

    classifier.evaluate(":x")
    assert first == []
    assert second == ["Command found"]


def test_clearing_command_handler_disables_evaluation():
    classifier = (
        ClassifierBuilder()
        .with_command_handler(lambda started: None)
        .with_command_handler(None)
        .build()
    )
    assert classifier.evaluate(":x") == EvaluationOutcome.DISABLED


def test_registration_order_does_not_matter():
    def log(text):
        pass

    def command(started):
        pass

    def suggestion(started):
        pass

    forward = (
        ClassifierBuilder()
        .with_log_handler(log)
        .with_command_handler(command)
        .with_suggestion_handler(suggestion)
        .build()
    )
    reverse = (
        ClassifierBuilder()
        .with_suggestion_handler(suggestion)
        .with_command_handler(command)
        .with_log_handler(log)
        .build()
    )

    assert forward.on_log is reverse.on_log is log
    assert forward.on_command_state_change is reverse.on_command_state_change is command
    assert forward.on_suggestion_state_change is reverse.on_suggestion_state_change is suggestion
    for line in [":cmd", "text", "  ", ":"]:
        assert forward.evaluate(line) == reverse.evaluate(line)


def test_from_config_uses_each_character_as_prefix():
    classifier = ClassifierBuilder.from_config(ClassifierConfig(command_prefixes="/!")).build()
    assert classifier.command_prefixes == frozenset({"/", "!"})
