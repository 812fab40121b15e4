"""Message chain reconstruction.

Each message links to its successor through ``next_id``. Messages arrive
in any order, so the chain is rebuilt per pipeline:

  1. The start is the first message (in first-seen order) whose id no
     other message references.
  2. ``next_id`` links are followed from there until a lookup misses or
     an id repeats.
  3. The walk is reversed for presentation.
"""

import logging

from pipeline_log_viewer.models import Pipeline, PipelineMessage

logger = logging.getLogger(__name__)


def find_tail(messages: dict[str, PipelineMessage]) -> PipelineMessage | None:
    """Return the first message not referenced by any next_id, or None."""
    referenced = {m.next_id for m in messages.values()}
    for message in messages.values():
        if message.id not in referenced:
            return message
    return None


def walk_chain(
    messages: dict[str, PipelineMessage], start: PipelineMessage
) -> list[PipelineMessage]:
    """Follow next_id links from *start*. Stops on a missing id or a revisit."""
    ordered = []
    visited = set()
    current = start
    while current is not None and current.id not in visited:
        visited.add(current.id)
        ordered.append(current)
        current = messages.get(current.next_id)
    return ordered


def reconstruct_chain(messages: dict[str, PipelineMessage]) -> list[PipelineMessage]:
    """Return the pipeline's messages in presentation order, or [] if no tail exists."""
    tail = find_tail(messages)
    if tail is None:
        if messages:
            logger.debug("No unreferenced message among %d, chain is cyclic", len(messages))
        return []

    ordered = walk_chain(messages, tail)
    ordered.reverse()
    return ordered


def build_pipelines(grouped: dict[str, dict[str, PipelineMessage]]) -> list[Pipeline]:
    """Reconstruct every grouped pipeline, keeping first-seen pipeline order."""
    return [
        Pipeline(id=pipeline_id, messages=reconstruct_chain(messages))
        for pipeline_id, messages in grouped.items()
    ]
