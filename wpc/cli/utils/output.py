"""Shared output handlers for CLI commands."""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel
from rich.console import Console

from wpc.core.constants import FormattingConstants

console = Console()


def _to_jsonable(data: Any) -> Any:
    if isinstance(data, BaseModel):
        return data.model_dump(mode="json")
    if isinstance(data, list | tuple):
        return [_to_jsonable(item) for item in data]
    return data


def handle_json_output(data: Any, output_path: Path | None) -> None:
    """Handle JSON format output.

    Args:
        data: Data to output (models, lists of models or plain data)
        output_path: Optional file path to save output
    """
    output_data = _to_jsonable(data)

    json_content = json.dumps(output_data, indent=FormattingConstants.JSON_INDENT, default=str, ensure_ascii=False)

    if output_path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(json_content, encoding="utf-8")
        console.print(f"[bold green]✓ Saved to:[/bold green] {output_path}")
    else:
        print(json_content)
