"""Configuration: immutable validator settings with a copy-and-override builder."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pydantic import field_validator

from .primitives.value_object import ValueObject

if TYPE_CHECKING:
    from collections.abc import Callable

DEFAULT_VIOLATION_MESSAGE = "The value is invalid."


class Configuration(ValueObject):
    """Settings of a validator.

    ``default_violation_message``
        Message given to unsatisfied constraints left without one.
    ``root_path``
        Segments prefixing every violation path.
    ``fail_on_first_violation``
        Stop the run as soon as one constraint is unsatisfied.

    Instantiate directly for plain values, or adjust an existing
    configuration through :meth:`build`::

        base = Configuration.build(lambda c: c.set_root_path("book"))
        strict = Configuration.build(
            lambda c: setattr(c, "fail_on_first_violation", True),
            source=base,
        )
    """

    default_violation_message: str = DEFAULT_VIOLATION_MESSAGE
    root_path: tuple[str, ...] = ()
    fail_on_first_violation: bool = False

    @field_validator("default_violation_message")
    @classmethod
    def _message_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("default_violation_message must not be blank")
        return value

    @classmethod
    def build(
        cls,
        block: Callable[[ConfigurationBuilder], object] | None = None,
        *,
        source: Configuration | None = None,
    ) -> Configuration:
        """Create a configuration from *source* (or the defaults) adjusted by *block*.

        *block* receives a throw-away :class:`ConfigurationBuilder`; once it
        returns, an immutable snapshot is taken and the builder is no longer
        connected to the result.
        """
        builder = ConfigurationBuilder.from_configuration(source or cls())
        if block is not None:
            block(builder)
        return builder.build()


@dataclass
class ConfigurationBuilder:
    """Mutable staging area used by :meth:`Configuration.build`."""

    default_violation_message: str = DEFAULT_VIOLATION_MESSAGE
    root_path: list[str] = field(default_factory=list)
    fail_on_first_violation: bool = False

    @classmethod
    def from_configuration(cls, configuration: Configuration) -> ConfigurationBuilder:
        return cls(
            default_violation_message=configuration.default_violation_message,
            root_path=list(configuration.root_path),
            fail_on_first_violation=configuration.fail_on_first_violation,
        )

    def set_root_path(self, *segments: str) -> None:
        """Replace the root path with *segments*."""
        self.root_path = list(segments)

    def build(self) -> Configuration:
        return Configuration(
            default_violation_message=self.default_violation_message,
            root_path=tuple(self.root_path),
            fail_on_first_violation=self.fail_on_first_violation,
        )
