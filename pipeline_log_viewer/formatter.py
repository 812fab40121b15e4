"""Output formatters: text, JSON (NDJSON), colorized (ANSI)."""

import json
from typing import Callable

from pipeline_log_viewer.models import Pipeline, pipeline_to_dict
from pipeline_log_viewer.parser import is_decode_failure

# ANSI color codes
HEADER_COLOR = "\033[1;36m"  # bold cyan
ID_COLOR = "\033[33m"        # yellow
ERROR_COLOR = "\033[31m"     # red
RESET = "\033[0m"


def format_text(pipelines: list[Pipeline]) -> str:
    """Return every pipeline block followed by a blank line."""
    return "".join(p.render() + "\n" for p in pipelines)


def format_json(pipelines: list[Pipeline]) -> str:
    """Return NDJSON: one JSON object per pipeline, compatible with jq."""
    return "".join(json.dumps(pipeline_to_dict(p)) + "\n" for p in pipelines)


def format_color(pipelines: list[Pipeline]) -> str:
    """Text layout with colored headers, ids and decode-failure bodies."""
    lines = []
    for pipeline in pipelines:
        lines.append(f"{HEADER_COLOR}Pipeline {pipeline.id}{RESET}\n")
        for message in pipeline.messages:
            body = message.body
            if is_decode_failure(message):
                body = f"{ERROR_COLOR}{body}{RESET}"
            lines.append(f"  {ID_COLOR}{message.id}{RESET}| {body}\n")
        lines.append("\n")
    return "".join(lines)


def get_formatter(output_format: str = "text", color: bool = False) -> Callable[[list[Pipeline]], str]:
    """Factory that returns the right formatter based on args."""
    if output_format == "json":
        return format_json
    if color:
        return format_color
    return format_text
