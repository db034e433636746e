"""Command-line interface: ``projectdump PATH... [-o FILE]``."""

from __future__ import annotations

import logging
from datetime import datetime

import click

from projectdump.infrastructure.config import get_settings
from projectdump.infrastructure.report_writer import write_report
from projectdump.interface.dependencies import get_use_case
from projectdump.interface.error_handlers import handle_errors
from projectdump.interface.schemas import DumpResponse
from projectdump.services.content_assembler import TIMESTAMP_FORMAT, assemble

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    )


@click.command(name="projectdump")
@click.argument("paths", nargs=-1, required=True, type=click.Path(path_type=str))
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, path_type=str),
    default=None,
    help="Write the report to FILE instead of stdout.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["markdown", "json"]),
    default="markdown",
    show_default=True,
)
@click.option(
    "--redact-secrets/--no-redact-secrets",
    default=None,
    help="Mask secret-looking strings in file contents.",
)
@click.option(
    "--max-listed-files",
    type=click.IntRange(min=0),
    default=None,
    help="Related files listed per technology before summarising the rest.",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default=None,
    help="Logging level (default: INFO).",
)
def cli(
    paths: tuple[str, ...],
    output: str | None,
    output_format: str,
    redact_secrets: bool | None,
    max_listed_files: int | None,
    log_level: str | None,
) -> None:
    """Dump one or more project directories as a single markdown snapshot."""
    settings = get_settings()
    _configure_logging(log_level or settings.log_level)

    if redact_secrets is None:
        redact_secrets = settings.redact_secrets
    if max_listed_files is None:
        max_listed_files = settings.max_listed_files

    with handle_errors():
        scans = get_use_case(settings).execute(paths)
        generated_at = datetime.now()

        if output_format == "json":
            document = DumpResponse.from_scans(
                scans,
                generated_on=generated_at.strftime(TIMESTAMP_FORMAT),
                redact_secrets=redact_secrets,
            ).model_dump_json(indent=2) + "\n"
        else:
            document = assemble(
                scans,
                generated_at=generated_at,
                max_listed_files=max_listed_files,
                redact_secrets=redact_secrets,
            )

        if output:
            write_report(document, output)
            logger.info("Output written to: %s", output)
        else:
            click.echo(document, nl=False)
