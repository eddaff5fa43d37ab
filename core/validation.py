# =============================================================================
# core/validation.py  —  Argument Validator
# =============================================================================
#
# Checks a tool call's arguments against its ToolDefinition BEFORE anything
# touches the network.  Parameters are checked in declaration order and the
# first problem is raised as a ValidationError; later problems are not
# collected.
#
# The result is a fresh, normalized dict:
#   - declared defaults filled in for missing optional parameters
#   - missing optional parameters without a default left out entirely
#   - arguments the catalog does not declare dropped
#   - integral floats (e.g. 50.0 from a JSON client) turned into ints
# =============================================================================

from numbers import Real
from typing import Any, Mapping, Optional

from core.errors import ValidationError
from core.models import ENUM, NUMBER, STRING, ParameterSpec, ToolDefinition


# Wording for action-specific requirements, e.g.
#   "songTitle is required for creating a request"
_ACTION_PHRASES: dict[tuple[str, str], str] = {
    ("manageSongRequest", "create"): "creating a request",
    ("manageSongRequest", "update"): "updating a request",
    ("manageSongRequest", "delete"): "deleting a request",
    ("manageSongAttributes", "get"): "getting song attributes",
    ("manageSongAttributes", "add"): "adding a song attribute",
    ("manageSongAttributes", "remove"): "removing a song attribute",
}


def _is_missing(value: Any) -> bool:
    return value is None or value == ""


def _check_kind(spec: ParameterSpec, value: Any) -> Any:
    """Type-check one supplied value and return its normalized form."""
    if spec.kind == STRING:
        if not isinstance(value, str):
            raise ValidationError(f"{spec.name} must be a string")
        return value

    if spec.kind == NUMBER:
        # bool is a subclass of int; true/false is not a count.
        if isinstance(value, bool) or not isinstance(value, Real):
            raise ValidationError(f"{spec.name} must be a number")
        if isinstance(value, float) and value.is_integer():
            return int(value)
        return value

    if spec.kind == ENUM:
        if value not in spec.values:
            raise ValidationError(f"{spec.name} must be one of: {', '.join(spec.values)}")
        return value

    raise ValidationError(f"{spec.name} has unsupported kind {spec.kind!r}")


def validate_arguments(definition: ToolDefinition, arguments: Optional[Mapping[str, Any]]) -> dict:
    """Validate and normalize ``arguments`` for ``definition``.

    Raises:
        ValidationError: naming the first missing or ill-typed parameter.
    """
    arguments = arguments or {}
    normalized: dict[str, Any] = {}

    for spec in definition.parameters:
        value = arguments.get(spec.name)

        if _is_missing(value):
            if spec.required:
                raise ValidationError(f"{spec.name} is required")
            action = normalized.get("action")
            if action in spec.required_for:
                phrase = _ACTION_PHRASES.get((definition.name, action), f"action '{action}'")
                raise ValidationError(f"{spec.name} is required for {phrase}")
            if spec.default is not None:
                normalized[spec.name] = spec.default
            continue

        normalized[spec.name] = _check_kind(spec, value)

    return normalized
