"""Codec configuration: tagged field names and the naming policy applied to them."""

from __future__ import annotations

from dataclasses import dataclass
import os
from typing import TYPE_CHECKING, Final

from dotenv import load_dotenv
from pydantic.alias_generators import to_camel, to_pascal, to_snake

from resultkit.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Callable

STATUS_FIELD_ENV: Final[str] = "RESULTKIT_STATUS_FIELD"
VALUE_FIELD_ENV: Final[str] = "RESULTKIT_VALUE_FIELD"
NAMING_ENV: Final[str] = "RESULTKIT_NAMING"

NAMING_POLICIES: Final[dict[str, Callable[[str], str]]] = {
    "camel": to_camel,
    "pascal": to_pascal,
    "snake": to_snake,
}


@dataclass(frozen=True)
class CodecConfig:
    """Immutable settings for encoding results as tagged objects.

    The naming policy renames the two field names only; the status tokens
    ``"ok"`` and ``"error"`` are written verbatim.

    Example:
        config = CodecConfig(alias_generator=to_pascal)
        # encodes as {"Status": "ok", "Value": 42}
    """

    status_field: str = "status"
    value_field: str = "value"
    #: Any ``str -> str`` callable, e.g. ``pydantic.alias_generators.to_camel``.
    alias_generator: Callable[[str], str] | None = None

    def __post_init__(self) -> None:
        """Validate field names before and after the naming policy."""
        for attr in ("status_field", "value_field"):
            name = getattr(self, attr)
            if not isinstance(name, str) or not name.strip():
                raise ConfigurationError(
                    f"{attr} must be a non-empty string, got {name!r}",
                    hint="Field names become JSON object keys.",
                )

        status_key, value_key = self.field_names()
        for key in (status_key, value_key):
            if not isinstance(key, str) or not key.strip():
                raise ConfigurationError(
                    f"Naming policy produced an invalid field name: {key!r}",
                    hint="The alias generator must map field names to non-empty strings.",
                )
        if status_key == value_key:
            raise ConfigurationError(
                f"status and value fields both resolve to {status_key!r}",
                hint="Pick distinct field names or a naming policy that keeps them apart.",
            )

    def field_names(self) -> tuple[str, str]:
        """Return the ``(status, value)`` keys after the naming policy."""
        if self.alias_generator is None:
            return self.status_field, self.value_field
        return (
            self.alias_generator(self.status_field),
            self.alias_generator(self.value_field),
        )

    @classmethod
    def from_env(cls, *, env_file: str | os.PathLike[str] | None = None) -> CodecConfig:
        """Resolve a config from ``RESULTKIT_*`` environment variables.

        A ``.env`` file is loaded first (``env_file`` or the nearest one found);
        variables already set in the environment take precedence over it.
        """
        load_dotenv(env_file)

        naming = os.environ.get(NAMING_ENV, "").strip().lower()
        if naming and naming not in NAMING_POLICIES:
            raise ConfigurationError(
                f"Unknown naming policy: {naming!r}",
                hint=f"Set {NAMING_ENV} to one of: {', '.join(NAMING_POLICIES)}.",
            )

        return cls(
            status_field=os.environ.get(STATUS_FIELD_ENV, "status"),
            value_field=os.environ.get(VALUE_FIELD_ENV, "value"),
            alias_generator=NAMING_POLICIES[naming] if naming else None,
        )
