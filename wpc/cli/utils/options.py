"""Shared CLI options and enums for commands."""

from enum import StrEnum
from pathlib import Path
from typing import Annotated

import typer


class OutputFormat(StrEnum):
    """Supported output formats across commands."""

    TABLE = "table"
    JSON = "json"


OUTPUT_FORMAT_OPTION = Annotated[
    OutputFormat,
    typer.Option(
        "--format",
        "-f",
        help="Output format",
        case_sensitive=False,
    ),
]

OUTPUT_PATH_OPTION = Annotated[
    Path | None,
    typer.Option(
        "--output",
        "-o",
        help="Write JSON output to this file instead of stdout",
    ),
]

FORCE_OPTION = Annotated[
    bool,
    typer.Option(
        "--force",
        help="Skip the cache and read from the source",
    ),
]

TEAM_OPTION = Annotated[
    int,
    typer.Option(
        "--team",
        "-t",
        help="Team: 2 = Terrorist, 3 = Counter-Terrorist",
        min=2,
        max=3,
    ),
]

AGENT_OPTION = Annotated[
    bool,
    typer.Option(
        "--agent",
        help="Treat DEFINDEX as an agent model instead of a weapon",
    ),
]

VERBOSE_OPTION = Annotated[
    bool,
    typer.Option(
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
]
