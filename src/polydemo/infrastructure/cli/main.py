import click

from polydemo.infrastructure.cli.exam_commands import exams
from polydemo.infrastructure.cli.rental_commands import rental
from polydemo.infrastructure.logging_config import configure_logging


@click.group(invoke_without_command=True)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """polydemo — rental pricing and exam grading demos.

    Without a subcommand, runs every demo in turn.
    """
    logger = configure_logging(verbose)
    if ctx.invoked_subcommand is None:
        logger.debug("No subcommand given, running all demos")
        ctx.invoke(rental)
        ctx.invoke(exams)


# Register subcommands
cli.add_command(rental)
cli.add_command(exams)
