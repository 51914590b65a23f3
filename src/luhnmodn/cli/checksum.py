import sys

import click
from rich.console import Console
from rich.table import Table

from luhnmodn import config
from luhnmodn.alphabets import ALPHABET_DEFINITIONS, get_alphabet
from luhnmodn.core import Luhn
from luhnmodn.errors import LuhnError
from luhnmodn.log import get_logger, log
from luhnmodn.utils import analyze_error_detection, generate_test_payloads

logger = get_logger("luhnmodn.cli")

preset_option = click.option(
    "--preset",
    "-p",
    is_flag=True,
    help="Treat ALPHABET as the name of a built-in alphabet (see `alphabets`).",
)


def _build_engine(alphabet: str, preset: bool) -> Luhn:
    """Create the engine, turning library errors into CLI errors."""
    try:
        if preset:
            return Luhn(get_alphabet(alphabet))
        return Luhn(alphabet)
    except LuhnError as e:
        raise click.ClickException(f"Error creating Luhn: {e}")
    except ValueError as e:
        raise click.ClickException(str(e))


@click.command("generate")
@click.argument("alphabet")
@click.argument("input")
@preset_option
@click.option("--steps", is_flag=True, help="Show every step of the computation.")
def generate(alphabet, input, preset, steps):
    """Prints the check character for INPUT over ALPHABET."""
    log(logger, "debug", "generate", alphabet=alphabet, input=input, preset=preset)
    luhn = _build_engine(alphabet, preset)

    try:
        if steps:
            ch, execution_steps = luhn.generate_with_steps(input)
            for step in execution_steps:
                click.echo(step)
        else:
            ch = luhn.generate(input)
    except LuhnError as e:
        raise click.ClickException(f"Error generating check character: {e}")

    click.echo(f"The check character is: {ch}")


@click.command("validate")
@click.argument("alphabet")
@click.argument("input")
@preset_option
@click.option(
    "--check",
    default=None,
    help="Check character to validate against, instead of the last character of INPUT.",
)
def validate(alphabet, input, preset, check):
    """Validates INPUT whose last character is its check character."""
    log(logger, "debug", "validate", alphabet=alphabet, input=input, check=check)
    luhn = _build_engine(alphabet, preset)

    try:
        if check is None:
            ok = luhn.validate(input)
        else:
            ok = luhn.validate_with(input, check)
    except LuhnError as e:
        raise click.ClickException(f"Error validating input: {e}")

    click.echo("valid" if ok else "invalid")
    if not ok:
        sys.exit(1)


@click.command("analyze")
@click.argument("alphabet")
@preset_option
@click.option(
    "--count",
    type=click.IntRange(min=1),
    default=config.DEFAULT_PAYLOAD_COUNT,
    show_default=True,
    help="Number of random payloads.",
)
@click.option(
    "--length",
    type=click.IntRange(min=1),
    default=config.DEFAULT_PAYLOAD_LENGTH,
    show_default=True,
    help="Length of each payload.",
)
def analyze(alphabet, preset, count, length):
    """Measures how many typing errors the check character detects."""
    luhn = _build_engine(alphabet, preset)
    payloads = generate_test_payloads(luhn.alphabet, count, length)
    log(logger, "debug", "analyze", base=len(luhn), count=count, length=length)

    results = analyze_error_detection(luhn, payloads)

    table = Table(title=f"Error detection (base {len(luhn)})")
    table.add_column("Error type")
    table.add_column("Total", justify="right")
    table.add_column("Detected", justify="right")
    table.add_column("Rate", justify="right")
    for error_type, stats in results.items():
        table.add_row(
            error_type,
            str(stats["total"]),
            str(stats["detected"]),
            f"{stats['detection_rate']:.2%}",
        )
    Console().print(table)


@click.command("alphabets")
def alphabets():
    """Lists the built-in alphabets."""
    table = Table(title="Built-in alphabets")
    table.add_column("Name")
    table.add_column("Base", justify="right")
    table.add_column("Description")
    for definition in ALPHABET_DEFINITIONS:
        table.add_row(
            definition.name, str(len(definition.alphabet)), definition.description
        )
    Console().print(table)
