"""Error translation: map domain errors to exit codes and stderr messages.

Each domain exception maps to a specific process exit code.  Anything that
is not a :class:`ProjectDumpError` propagates untouched.
"""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from typing import Iterator

import click

from projectdump.domain.exceptions import (
    OutputWriteError,
    ProjectDumpError,
    ProjectNotFoundError,
    ProjectScanError,
)

logger = logging.getLogger(__name__)

_EXCEPTION_EXIT_CODES: list[tuple[type[ProjectDumpError], int]] = [
    (ProjectNotFoundError, 2),
    (ProjectScanError, 1),
    (OutputWriteError, 1),
]

_DEFAULT_EXIT_CODE = 1


def exit_code_for(exc: ProjectDumpError) -> int:
    for exc_type, code in _EXCEPTION_EXIT_CODES:
        if isinstance(exc, exc_type):
            return code
    return _DEFAULT_EXIT_CODE


@contextmanager
def handle_errors() -> Iterator[None]:
    """Report a domain error on stderr and exit with its mapped code."""
    try:
        yield
    except ProjectDumpError as exc:
        logger.debug("%s: %s", type(exc).__name__, exc, exc_info=True)
        click.echo(f"Error: {exc}", err=True)
        sys.exit(exit_code_for(exc))
