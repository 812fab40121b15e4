"""pipeline-logs: rebuild per-pipeline message order from shuffled log lines."""

import logging
import os
import sys
from argparse import ArgumentParser

from pipeline_log_viewer.config import ConfigError, load_config, load_yaml_config
from pipeline_log_viewer.formatter import get_formatter
from pipeline_log_viewer.reader import expand_paths, read_stdin, read_text
from pipeline_log_viewer.service import PipelineService
from pipeline_log_viewer.stats import compute_stats, format_stats_json, format_stats_text

logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s [PIPELINES] %(levelname)s %(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger(__name__)


def build_parser() -> ArgumentParser:
    """Build the CLI argument parser."""
    parser = ArgumentParser(
        prog="pipeline-logs",
        description="Reconstruct pipeline message chains from out-of-order log lines.",
    )
    parser.add_argument(
        "files",
        nargs="*",
        help="Log file path(s) or glob pattern(s); reads stdin when omitted",
    )
    parser.add_argument(
        "--output",
        choices=["text", "json"],
        default=None,
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--color",
        action="store_true",
        help="Colorize headers, ids and decode failures (ANSI)",
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Show parse statistics instead of pipelines",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to YAML config file",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log skipped lines and unresolved chains to stderr",
    )
    return parser


def run(args) -> int:
    try:
        config = load_config(args, load_yaml_config(args.config))
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logging.getLogger().setLevel(config.log_level)

    if args.files:
        try:
            paths = expand_paths(args.files)
        except FileNotFoundError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        logger.info("Reading %d file(s)", len(paths))
        text = read_text(paths)
    else:
        text = read_stdin()

    service = PipelineService(get_formatter(config.output_format, config.color))
    pipelines, result = service.analyze(text)
    logger.info("Parsed %d line(s), skipped %d, %d pipeline(s)",
                len(result.messages), len(result.skipped), len(pipelines))

    if config.show_stats:
        stats = compute_stats(result, pipelines)
        if config.output_format == "json":
            print(format_stats_json(stats))
        else:
            print(format_stats_text(stats))
        return 0

    sys.stdout.write(service.format_pipelines(pipelines))
    return 0


def main():
    parser = build_parser()
    args = parser.parse_args()
    try:
        code = run(args)
    except KeyboardInterrupt:
        code = 0
    except BrokenPipeError:
        # stdout is gone; keep the interpreter from reporting it again on exit
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        code = 0
    sys.exit(code)


if __name__ == "__main__":
    main()
