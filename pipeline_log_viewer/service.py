"""Parse-group-reconstruct-render facade.

Callers that want structured data use ``parse_logs``; callers that only
display text use ``parse_and_format``. Both run on the same reconstructed
pipelines, so nothing is parsed twice.
"""

from typing import Callable

from pipeline_log_viewer.chain import build_pipelines
from pipeline_log_viewer.formatter import format_text
from pipeline_log_viewer.grouper import group_by_pipeline
from pipeline_log_viewer.models import Pipeline
from pipeline_log_viewer.parser import ParseResult, parse_lines


class PipelineService:
    """Stateless between calls; safe to share."""

    def __init__(self, formatter: Callable[[list[Pipeline]], str] = format_text):
        self._formatter = formatter

    def analyze(self, text: str) -> tuple[list[Pipeline], ParseResult]:
        """Return reconstructed pipelines plus the parse diagnostics."""
        result = parse_lines(text)
        pipelines = build_pipelines(group_by_pipeline(result.messages))
        return pipelines, result

    def parse_logs(self, text: str) -> list[Pipeline]:
        pipelines, _ = self.analyze(text)
        return pipelines

    def format_pipelines(self, pipelines: list[Pipeline]) -> str:
        if not pipelines:
            return ""
        return self._formatter(pipelines)

    def parse_and_format(self, text: str) -> str:
        if not text or not text.strip():
            return ""
        return self.format_pipelines(self.parse_logs(text))


_default_service = PipelineService()


def parse_logs(text: str) -> list[Pipeline]:
    return _default_service.parse_logs(text)


def format_pipelines(pipelines: list[Pipeline]) -> str:
    return _default_service.format_pipelines(pipelines)
