"""Pipeline message and pipeline dataclasses."""

from dataclasses import dataclass, field, asdict
from typing import Any

NO_SUCCESSOR = "-1"

ENCODING_PLAIN = 0
ENCODING_HEX = 1


@dataclass(frozen=True)
class PipelineMessage:
    pipeline_id: str
    id: str
    body: str
    next_id: str
    encoding: int


@dataclass
class Pipeline:
    id: str
    messages: list[PipelineMessage] = field(default_factory=list)

    def render(self) -> str:
        """Return the header line plus one indented line per message."""
        lines = [f"Pipeline {self.id}\n"]
        for message in self.messages:
            lines.append(f"  {message.id}| {message.body}\n")
        return "".join(lines)


def message_to_dict(message: PipelineMessage) -> dict[str, Any]:
    """Drop pipeline_id, which is already carried by the enclosing pipeline."""
    d = asdict(message)
    d.pop("pipeline_id")
    return d


def pipeline_to_dict(pipeline: Pipeline) -> dict[str, Any]:
    return {
        "pipeline_id": pipeline.id,
        "messages": [message_to_dict(m) for m in pipeline.messages],
    }
