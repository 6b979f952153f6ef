"""CLI utilities module."""

from wpc.cli.utils.data import build_fetcher, find_agent, find_skin, open_store, resolve_attachments
from wpc.cli.utils.options import (
    AGENT_OPTION,
    FORCE_OPTION,
    OUTPUT_FORMAT_OPTION,
    OUTPUT_PATH_OPTION,
    TEAM_OPTION,
    OutputFormat,
)
from wpc.cli.utils.output import handle_json_output

__all__ = [
    "AGENT_OPTION",
    "FORCE_OPTION",
    "OUTPUT_FORMAT_OPTION",
    "OUTPUT_PATH_OPTION",
    "TEAM_OPTION",
    "OutputFormat",
    "build_fetcher",
    "find_agent",
    "find_skin",
    "handle_json_output",
    "open_store",
    "resolve_attachments",
]
