"""Partition parsed messages by pipeline id."""

from typing import Iterable

from pipeline_log_viewer.models import PipelineMessage


def group_by_pipeline(
    messages: Iterable[PipelineMessage],
) -> dict[str, dict[str, PipelineMessage]]:
    """Return {pipeline_id: {message_id: message}}.

    Pipelines appear in order of first appearance. A repeated
    (pipeline_id, id) pair replaces the earlier message but keeps the
    id's original position in the inner dict.
    """
    pipelines: dict[str, dict[str, PipelineMessage]] = {}
    for message in messages:
        pipelines.setdefault(message.pipeline_id, {})[message.id] = message
    return pipelines
