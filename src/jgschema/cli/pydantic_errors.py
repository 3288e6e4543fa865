"""Translate Pydantic errors to user-friendly messages."""

from __future__ import annotations

from pydantic_core import ErrorDetails

# Translation map for Pydantic error types
ERROR_TRANSLATIONS: dict[str, str] = {
    "missing": "This field is required but was not provided",
    "extra_forbidden": "This setting is not recognized",
    "string_type": "Must be a string",
    "int_type": "Must be an integer",
    "int_parsing": "Must be an integer",
    "list_type": "Must be a list",
    "tuple_type": "Must be a list",
    "dict_type": "Must be an object/mapping",
    "model_type": "Must be a schema object",
    "greater_than": "Value is too small",
    "less_than_equal": "Value is too large",
    "too_short": "Must not be empty",
}


def translate_pydantic_error(error: ErrorDetails) -> str:
    """Translate a Pydantic error to a user-friendly message.

    Args:
    ----
        error: The Pydantic error details.

    Returns:
    -------
        User-friendly error message.

    """
    error_type = error["type"]
    ctx = error.get("ctx") or {}

    base_msg = ERROR_TRANSLATIONS.get(error_type, error["msg"])

    if error_type == "greater_than":
        base_msg = f"Must be greater than {ctx.get('gt', 0)}"
    elif error_type == "less_than_equal":
        base_msg = f"Must be at most {ctx.get('le')}"
    elif error_type == "too_short":
        base_msg = f"Must have at least {ctx.get('min_length', 1)} item(s)"

    return base_msg


def format_pydantic_location(loc: tuple[str | int, ...]) -> str:
    """Format Pydantic location tuple to readable path.

    Args:
    ----
        loc: Location tuple from Pydantic error.

    Returns:
    -------
        Formatted path string, e.g. ``properties.address.type``.

    """
    parts: list[str] = []
    for part in loc:
        if isinstance(part, int):
            parts.append(f"[{part}]")
        else:
            if parts:
                parts.append(".")
            parts.append(str(part))

    return "".join(parts)


def get_suggestion_for_error(error: ErrorDetails) -> str | None:
    """Get a suggestion for how to fix the error.

    Args:
    ----
        error: The Pydantic error details.

    Returns:
    -------
        Suggestion string or None.

    """
    suggestions: dict[str, str] = {
        "extra_forbidden": "Remove this setting or check for typos",
        "string_type": "Quote the value in your schema file",
        "dict_type": "Use a mapping of names to schema objects",
        "model_type": "Replace the value with a JSON Schema object",
    }

    return suggestions.get(error["type"])
