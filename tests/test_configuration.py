from __future__ import annotations

import pytest
from pydantic import ValidationError as PydanticValidationError

from fieldcheck.configuration import (
    DEFAULT_VIOLATION_MESSAGE,
    Configuration,
    ConfigurationBuilder,
)


def test_defaults() -> None:
    configuration = Configuration()

    assert configuration.default_violation_message == DEFAULT_VIOLATION_MESSAGE
    assert configuration.root_path == ()
    assert configuration.fail_on_first_violation is False


def test_build_from_defaults() -> None:
    def block(builder: ConfigurationBuilder) -> None:
        builder.default_violation_message = "Nope"
        builder.set_root_path("book", "title")
        builder.fail_on_first_violation = True

    configuration = Configuration.build(block)

    assert configuration == Configuration(
        default_violation_message="Nope",
        root_path=("book", "title"),
        fail_on_first_violation=True,
    )


def test_build_with_empty_block_round_trips() -> None:
    source = Configuration(
        default_violation_message="Invalid",
        root_path=("a", "b"),
        fail_on_first_violation=True,
    )

    assert Configuration.build(source=source) == source
    assert Configuration.build(lambda _: None, source=source) == source


def test_build_copies_source_fields() -> None:
    source = Configuration(default_violation_message="Invalid", root_path=("a",))

    derived = Configuration.build(
        lambda c: setattr(c, "fail_on_first_violation", True), source=source
    )

    assert derived.default_violation_message == "Invalid"
    assert derived.root_path == ("a",)
    assert derived.fail_on_first_violation is True
    assert source.fail_on_first_violation is False


def test_retained_builder_cannot_mutate_configuration() -> None:
    captured: list[ConfigurationBuilder] = []

    def block(builder: ConfigurationBuilder) -> None:
        builder.set_root_path("before")
        captured.append(builder)

    configuration = Configuration.build(block)
    captured[0].set_root_path("after")
    captured[0].root_path.append("more")
    captured[0].fail_on_first_violation = True

    assert configuration.root_path == ("before",)
    assert configuration.fail_on_first_violation is False


def test_configuration_is_frozen() -> None:
    configuration = Configuration()

    with pytest.raises(PydanticValidationError):
        configuration.fail_on_first_violation = True  # type: ignore[misc]


@pytest.mark.parametrize("message", ["", "   "])
def test_blank_default_message_is_rejected(message: str) -> None:
    with pytest.raises(PydanticValidationError):
        Configuration(default_violation_message=message)


def test_equality_and_hash_cover_all_fields() -> None:
    first = Configuration(root_path=("a",))
    second = Configuration(root_path=("a",))
    third = Configuration(root_path=("a",), fail_on_first_violation=True)

    assert first == second
    assert hash(first) == hash(second)
    assert first != third


def test_replace_revalidates() -> None:
    configuration = Configuration()

    assert configuration.replace(fail_on_first_violation=True) == Configuration(
        fail_on_first_violation=True
    )
    with pytest.raises(PydanticValidationError):
        configuration.replace(default_violation_message=" ")


def test_unknown_fields_are_rejected() -> None:
    with pytest.raises(PydanticValidationError):
        Configuration(fail_fast=True)  # type: ignore[call-arg]
