"""Stringifier configuration."""

from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from treexml.exceptions import OptionsError
from treexml.types import ReplaceEvent


def identity(event: ReplaceEvent) -> str:
    """Default replacer, returns the escaped value unchanged."""
    return event.value


class StringifierOptions(BaseModel):
    """Options controlling how a document is written.

    Attributes:
        indent_size: Spaces per depth level
        debug: Trace each step on the ``treexml`` logger
        progress: Called with the cumulative output length after each opening tag
        null_to_empty: Write None scalars as empty strings instead of escaping them
        replacer: Hook run on every escaped value before it is written
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)

    indent_size: int = Field(default=2, ge=0, alias="indentSize")
    debug: bool = False
    progress: Callable[[int], Any] | None = None
    null_to_empty: bool = Field(default=True, alias="nullToEmpty")
    replacer: Callable[[ReplaceEvent], Any] = identity


def make_options(options: StringifierOptions | dict | None = None, **overrides) -> StringifierOptions:
    """Build validated options from an instance, a mapping and/or keywords.

    Raises:
        OptionsError: If an option is unknown or has an invalid value
    """
    if isinstance(options, StringifierOptions):
        if not overrides:
            return options
        values = options.model_dump()
    else:
        values = dict(options or {})
    values.update(overrides)

    # None means "use the default" for the hooks
    if values.get("replacer") is None:
        values.pop("replacer", None)

    try:
        return StringifierOptions(**values)
    except ValidationError as e:
        raise OptionsError(f"Invalid stringifier options: {e}", errors=e.errors()) from e
