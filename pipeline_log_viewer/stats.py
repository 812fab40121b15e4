"""Statistics: parse success, decode failures, chain coverage."""

import json
from dataclasses import dataclass, field

from pipeline_log_viewer.grouper import group_by_pipeline
from pipeline_log_viewer.models import Pipeline
from pipeline_log_viewer.parser import ParseResult, is_invalid_encoding, is_invalid_hex


@dataclass
class ParseStats:
    total_lines: int = 0
    parsed_count: int = 0
    skipped_count: int = 0
    invalid_encoding_count: int = 0
    invalid_hex_count: int = 0
    pipeline_count: int = 0
    messages_per_pipeline: dict[str, int] = field(default_factory=dict)
    unresolved_pipelines: list[str] = field(default_factory=list)
    orphaned_messages: int = 0
    skipped_line_numbers: list[int] = field(default_factory=list)


def compute_stats(result: ParseResult, pipelines: list[Pipeline]) -> ParseStats:
    """Summarize one parse run.

    Orphaned messages are parsed (and deduplicated) messages that did not
    end up on their pipeline's reconstructed chain.
    Decode failures are counted from the encoding tag, after deduplication.
    """
    grouped = group_by_pipeline(result.messages)
    unique = [m for msgs in grouped.values() for m in msgs.values()]
    on_chain = sum(len(p.messages) for p in pipelines)

    return ParseStats(
        total_lines=result.total_lines,
        parsed_count=len(result.messages),
        skipped_count=len(result.skipped),
        invalid_encoding_count=sum(1 for m in unique if is_invalid_encoding(m)),
        invalid_hex_count=sum(1 for m in unique if is_invalid_hex(m)),
        pipeline_count=len(pipelines),
        messages_per_pipeline={p.id: len(p.messages) for p in pipelines},
        unresolved_pipelines=[p.id for p in pipelines if not p.messages],
        orphaned_messages=len(unique) - on_chain,
        skipped_line_numbers=[s.line_no for s in result.skipped],
    )


def format_stats_text(stats: ParseStats) -> str:
    """Human-readable stats summary."""
    lines = []
    lines.append(f"Total lines: {stats.total_lines}")
    lines.append(f"Parsed: {stats.parsed_count}")
    lines.append(f"Skipped: {stats.skipped_count}")
    if stats.skipped_line_numbers:
        lines.append("  lines " + ", ".join(str(n) for n in stats.skipped_line_numbers))
    lines.append(f"Invalid encoding: {stats.invalid_encoding_count}")
    lines.append(f"Invalid hex: {stats.invalid_hex_count}")
    lines.append("")

    lines.append(f"Pipelines: {stats.pipeline_count}")
    for pipeline_id, count in stats.messages_per_pipeline.items():
        lines.append(f"  {pipeline_id:12s} {count}")
    lines.append("")

    if stats.unresolved_pipelines:
        lines.append(f"Unresolved chains ({len(stats.unresolved_pipelines)}):")
        for pipeline_id in stats.unresolved_pipelines:
            lines.append(f"  - {pipeline_id}")
    else:
        lines.append("No unresolved chains.")
    lines.append(f"Orphaned messages: {stats.orphaned_messages}")

    return "\n".join(lines)


def format_stats_json(stats: ParseStats) -> str:
    """JSON stats output."""
    return json.dumps({
        "total_lines": stats.total_lines,
        "parsed_count": stats.parsed_count,
        "skipped_count": stats.skipped_count,
        "skipped_line_numbers": stats.skipped_line_numbers,
        "invalid_encoding_count": stats.invalid_encoding_count,
        "invalid_hex_count": stats.invalid_hex_count,
        "pipeline_count": stats.pipeline_count,
        "messages_per_pipeline": stats.messages_per_pipeline,
        "unresolved_pipelines": stats.unresolved_pipelines,
        "orphaned_messages": stats.orphaned_messages,
    }, indent=2)
