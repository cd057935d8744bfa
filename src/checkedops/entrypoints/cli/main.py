"""CHECKEDOPS CLI entry point.

Defines the top-level ``checkedops`` command (via Click-Extra) and one
subcommand per checked operation.

Behavior
- Results go to **stdout**; failures are reported on **stderr** as
  ``<Kind>: <message>`` and exit with status 1.
- Integer operations honor ``--int-bits`` (or ``CHECKEDOPS_INT_BITS``).
- Commands taking integers accept negative values without ``--``.

Examples
    $ checkedops reverse 'Hello!'
    $ checkedops divide 14 4
    $ checkedops lookup-number two one=1 two=2 three=3
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING, Any

import click
import click_extra as clickx

from checkedops import __version__, config, operations
from checkedops.logging import console_handler, log_startup
from checkedops.outcome import attempt

from .helpers import error, parse_int_pairs, parse_log_level, parse_str_pairs

if TYPE_CHECKING:
    from logging import Handler

    from checkedops.config import IntegerBounds

logger = logging.getLogger(__name__)

HELP = """CHECKEDOPS command-line interface.

    Run a single checked operation on literal inputs. Every rejected input is
    reported with its error kind and a fixed message.
    """

# Lets negative numbers through as arguments instead of unknown options.
NUMERIC_ARGS = {"ignore_unknown_options": True}


def _run(func: Callable[..., Any], *args: Any, **kwargs: Any) -> None:
    """Run an operation, echo its result, or report its failure and exit 1."""
    outcome = attempt(func, *args, **kwargs)
    if (failure := outcome.error) is not None:
        logger.info("%s failed with %s", func.__name__, failure.kind.value)
        error(f"{failure.kind.value}: {failure.message}")
        raise click.exceptions.Exit(1)
    logger.info("%s returned %r", func.__name__, outcome.value)
    click.echo(outcome.value)


def _to_decimal(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter,
    value: str,
) -> Decimal:
    try:
        number = Decimal(value)
    except InvalidOperation as e:
        raise click.BadParameter(f"{value!r} is not a number", param=param) from e
    if not number.is_finite():
        raise click.BadParameter(f"{value!r} is not a finite number", param=param)
    return number


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (log timestamps, logger names and source paths).",
    default=False,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    envvar="CHECKEDOPS_LOGGER_LEVEL",
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). Repeatable "
        "(e.g. -L checkedops.operations=INFO) or via CHECKEDOPS_LOGGER_LEVEL "
        "(comma/space list)."
    ),
    show_envvar=True,
)
@click.option(
    "--int-bits",
    "int_bits",
    metavar="[" + "|".join(str(bits) for bits in config.SUPPORTED_BOUNDS) + "]",
    default=None,
    envvar=config.INT_BITS_ENV_VAR,
    show_envvar=True,
    help=(
        "Width of the signed integers used by parse-int, add, divide and "
        f"lookup-number. Defaults to {config.DEFAULT_INT_BITS}."
    ),
)
@clickx.pass_context
def checkedops(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    logger_levels: dict[str, int],
    int_bits: str | None,
) -> None:
    """CHECKEDOPS command-line interface."""

    # 0) compute effective verbosity
    base_level = logging.WARNING
    level = base_level - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    # 1) resolve integer bounds
    try:
        bounds = (
            config.bounds_for(int_bits)
            if (int_bits or "").strip()
            else config.get_integer_bounds()
        )
    except config.UnsupportedIntegerWidthError as e:
        raise click.ClickException(str(e)) from e
    ctx.obj = bounds

    # 2) configure console handler and root logger
    use_color = ctx.color is not False  # None or True => allow color
    handlers: list[Handler] = [
        console_handler(level, debug_mode=debug, color=use_color)
    ]
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    # 3) per-logger levels
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        bounds=bounds,
        logger_levels=logger_levels,
    )

    ctx.call_on_close(logging.shutdown)


# ============================================================================
#                               Subcommands
# ============================================================================


@click.command()
@click.argument("text")
def reverse(text: str) -> None:
    """Reverse TEXT."""
    _run(operations.reverse, text)


@click.command(context_settings=NUMERIC_ARGS)
@click.argument("price", callback=_to_decimal)
@click.argument("discount", callback=_to_decimal)
def discount(price: Decimal, discount: Decimal) -> None:  # pylint: disable=redefined-outer-name
    """Take DISCOUNT percent off PRICE."""
    _run(operations.calculate_discount, price, discount)


@click.command(context_settings=NUMERIC_ARGS)
@click.argument("index", type=int)
@click.argument("values", nargs=-1, type=int)
def element(index: int, values: tuple[int, ...]) -> None:
    """Print the element of VALUES at INDEX."""
    _run(operations.get_element, values, index)


@click.command()
@click.option(
    "--logged-in/--logged-out",
    "logged_in",
    default=False,
    show_default=True,
    help="Whether the caller is logged in.",
)
def secure(logged_in: bool) -> None:
    """Perform an operation reserved for logged-in users."""
    _run(operations.perform_secure_operation, logged_in)


@click.command("parse-int", context_settings=NUMERIC_ARGS)
@click.argument("text")
@click.pass_obj
def parse_int(bounds: IntegerBounds, text: str) -> None:
    """Parse TEXT as an integer."""
    _run(operations.parse_int, text, bounds=bounds)


@click.command()
@click.argument("key")
@click.argument("pairs", nargs=-1, callback=parse_int_pairs)
def lookup(key: str, pairs: dict[str, int]) -> None:
    """Find KEY among KEY=INTEGER PAIRS."""
    _run(operations.find_value_by_key, pairs, key)


@click.command(context_settings=NUMERIC_ARGS)
@click.argument("x", type=int)
@click.argument("y", type=int)
@click.pass_obj
def add(bounds: IntegerBounds, x: int, y: int) -> None:
    """Add X and Y without overflowing."""
    _run(operations.add_numbers, x, y, bounds=bounds)


@click.command(context_settings=NUMERIC_ARGS)
@click.argument("dividend", type=int)
@click.argument("divisor", type=int)
@click.pass_obj
def divide(bounds: IntegerBounds, dividend: int, divisor: int) -> None:
    """Divide DIVIDEND by DIVISOR, truncating toward zero."""
    _run(operations.divide_numbers, dividend, divisor, bounds=bounds)


@click.command("sum", context_settings=NUMERIC_ARGS)
@click.argument("index", type=int)
@click.argument("values", nargs=-1, type=int)
def sum_(index: int, values: tuple[int, ...]) -> None:
    """Sum VALUES once INDEX is checked against their bounds."""
    _run(operations.sum_collection_elements, values, index)


@click.command("lookup-number")
@click.argument("key")
@click.argument("pairs", nargs=-1, callback=parse_str_pairs)
@click.pass_obj
def lookup_number(bounds: IntegerBounds, key: str, pairs: dict[str, str]) -> None:
    """Find KEY among KEY=VALUE PAIRS and parse its value as an integer."""
    _run(operations.get_element_as_number, pairs, key, bounds=bounds)


for _command in (
    reverse,
    discount,
    element,
    secure,
    parse_int,
    lookup,
    add,
    divide,
    sum_,
    lookup_number,
):
    checkedops.add_command(_command)
