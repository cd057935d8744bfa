"""Parsers for repeatable NAME=VALUE style CLI options and arguments.

Values may be given as repeated items or as a single comma/space-separated
string (as read from an environment variable). The logger-level parser maps
level names to numeric logging levels; the pair parsers build the mappings
passed to the lookup operations.
"""

import logging
import re

import click

from checkedops import operations
from checkedops.config import INT32, IntegerBounds
from checkedops.errors import IntegerFormatError
from checkedops.logging import DEFAULT_LOGGER_LEVELS


def _normalize_items(value: str | list[str] | tuple[str, ...]) -> list[str]:
    """Normalize an input value into a flat list of items.

    Splits the input on commas and whitespace and removes empty fragments.
    Accepts either a single string (which may contain multiple comma/space-
    separated items) or a sequence of strings (as provided by repeatable Click
    options and variadic arguments).

    Args:
        value (str | list[str] | tuple[str, ...]): The raw value from Click.

    Returns:
        list[str]: A flat list of non-empty item strings.
    """
    items: list[str] = []
    if isinstance(value, (tuple, list)):
        for v in value:
            items.extend([s for s in re.split(r"[,\s]+", v) if s])
    else:
        items.extend([s for s in re.split(r"[,\s]+", value) if s])
    return items


def _split_pair(item: str, expected: str) -> tuple[str, str]:
    try:
        name, raw = item.split("=", 1)
    except ValueError as e:
        raise click.BadParameter(f"Expected {expected}, got {item!r}") from e
    return name.strip(), raw.strip()


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...],
) -> dict[str, int]:
    """Click callback that parses NAME=LEVEL pairs into a name->level dict.

    Combines DEFAULT_LOGGER_LEVELS with any overrides supplied via the CLI. Each
    item must be of the form NAME=LEVEL where LEVEL is a standard logging level
    name (e.g. DEBUG, INFO, WARNING).

    Returns:
        dict[str, int]: Mapping of logger names to numeric logging levels.

    Raises:
        click.BadParameter: If an item is malformed (not NAME=LEVEL) or LEVEL is invalid.
    """
    levels = dict(DEFAULT_LOGGER_LEVELS)
    for item in _normalize_items(value):
        name, level_str = _split_pair(item, "NAME=LEVEL")
        if not isinstance(lvl := getattr(logging, level_str.upper(), None), int):
            raise click.BadParameter(f"Invalid log level: {level_str}")
        levels[name] = lvl
    return levels


def parse_str_pairs(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...],
) -> dict[str, str]:
    """Click callback that parses KEY=VALUE items into a str->str dict.

    Values are kept verbatim; later items override earlier ones.

    Raises:
        click.BadParameter: If an item is not of the form KEY=VALUE.
    """
    pairs: dict[str, str] = {}
    for item in _normalize_items(value):
        key, raw = _split_pair(item, "KEY=VALUE")
        pairs[key] = raw
    return pairs


def parse_int_pairs(
    ctx: click.Context,
    param: click.Parameter | None,
    value: str | list[str] | tuple[str, ...],
) -> dict[str, int]:
    """Click callback that parses KEY=INTEGER items into a str->int dict.

    Values follow the same literal rules as `operations.parse_int`, within the
    integer bounds stored on the context (int32 when none are set).

    Raises:
        click.BadParameter: If an item is malformed or its value is not an integer.
    """
    obj = getattr(ctx, "obj", None)
    bounds = obj if isinstance(obj, IntegerBounds) else INT32
    pairs: dict[str, int] = {}
    for key, raw in parse_str_pairs(ctx, param, value).items():
        try:
            pairs[key] = operations.parse_int(raw, bounds=bounds)
        except IntegerFormatError as e:
            raise click.BadParameter(
                f"Expected an integer for {key!r}, got {raw!r}"
            ) from e
    return pairs
