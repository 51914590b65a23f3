import click

from luhnmodn.cli.checksum import alphabets, analyze, generate, validate
from luhnmodn.log import set_level


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def cli(verbose):
    """A CLI tool for Luhn mod N check characters over any alphabet."""
    if verbose:
        set_level("DEBUG")


# Add checksum commands
cli.add_command(generate)
cli.add_command(validate)
cli.add_command(analyze)
cli.add_command(alphabets)


if __name__ == "__main__":
    cli()
