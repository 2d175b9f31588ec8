"""
Name-based dispatch to the request builders.

Lets callers select a builder by version, group and operation name, as in
``api("v1", "groupsAPI", "show", 547033, {"fields": ":(id,name)"})``. Group
names may carry the "API" suffix, and operation and option names may be
camelCase.
"""

import inspect
import re
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from . import v1
from .core.config import get_settings
from .core.exceptions import (
    InvalidOptionError,
    MissingArgumentError,
    UnknownOperationError,
)
from .core.logging import get_logger
from .models import RequestDescriptor

logger = get_logger("dispatch")

VERSIONS: Dict[str, Dict[str, Dict[str, Callable[..., Optional[RequestDescriptor]]]]] = {
    "v1": v1.OPERATIONS,
}

# Option names whose keyword differs beyond snake-casing
OPTION_ALIASES = {"id": "member_id"}

_CAMEL_BOUNDARY_RE = re.compile(r"(?<=[a-z0-9])([A-Z])")


def snake_case(name: str) -> str:
    return _CAMEL_BOUNDARY_RE.sub(r"_\1", name).lower()


def normalize_group(group: str) -> str:
    if group.endswith("API"):
        group = group[: -len("API")]
    return group.lower()


def normalize_options(options: Mapping[str, Any]) -> Dict[str, Any]:
    """Map camelCase option names to builder keywords."""
    return {OPTION_ALIASES.get(key, snake_case(key)): value for key, value in options.items()}


def resolve(
    version: Optional[str], group: str, operation: str
) -> Callable[..., Optional[RequestDescriptor]]:
    """Look up a builder, raising ``UnknownOperationError`` if there is none."""
    version = version or get_settings().api_version
    groups = VERSIONS.get(version)
    if groups is None:
        raise UnknownOperationError(
            f"Unknown API version: {version}", {"available": sorted(VERSIONS)}
        )

    operations = groups.get(normalize_group(group))
    if operations is None:
        raise UnknownOperationError(
            f"Unknown endpoint group: {group}", {"available": sorted(groups)}
        )

    builder = operations.get(snake_case(operation))
    if builder is None:
        raise UnknownOperationError(
            f"Unknown operation: {group}.{operation}",
            {"available": sorted(operations)},
        )
    return builder


def split_options(
    builder: Callable[..., Optional[RequestDescriptor]], args: Tuple[Any, ...]
) -> Tuple[Tuple[Any, ...], Dict[str, Any]]:
    """Pop a trailing options mapping off ``args``, as in ``(547033, {"count": 10})``.

    The mapping is taken as options when the builder has keyword-only
    options, or when it carries the ``body`` of a builder that takes one.
    Otherwise it stays a positional argument.
    """
    if not args or not isinstance(args[-1], Mapping):
        return args, {}

    params = inspect.signature(builder).parameters
    trailing = args[-1]
    takes_options = any(p.kind is inspect.Parameter.KEYWORD_ONLY for p in params.values())
    if takes_options or ("body" in params and "body" in trailing):
        return args[:-1], dict(trailing)
    return args, {}


def api(
    version: Optional[str],
    group: str,
    operation: str,
    *args: Any,
    strict: bool = False,
    **options: Any,
) -> Optional[RequestDescriptor]:
    """Build a request descriptor by name.

    Options may be given as keywords or as a trailing mapping; keywords win
    when both name the same option. Returns None when a required argument is
    missing, or raises ``MissingArgumentError`` instead when ``strict`` is
    set. Arguments that do not fit the builder raise ``InvalidOptionError``.
    """
    builder = resolve(version, group, operation)
    args, trailing = split_options(builder, args)
    kwargs = normalize_options(trailing)
    kwargs.update(normalize_options(options))

    try:
        inspect.signature(builder).bind(*args, **kwargs)
    except TypeError as e:
        raise InvalidOptionError(
            f"Invalid arguments for {group}.{operation}: {e}",
            {"args": list(args), "options": sorted(kwargs)},
        ) from e

    logger.debug("Dispatching %s.%s", normalize_group(group), builder.__name__)
    descriptor = builder(*args, **kwargs)

    if descriptor is None and strict:
        raise MissingArgumentError(
            f"Missing required argument for {group}.{operation}",
            {"args": list(args)},
        )
    return descriptor
