"""Input loading for the CLI: glob expansion, file and stdin reading."""

import glob
import os
import sys


def expand_paths(raw_paths: list[str]) -> list[str]:
    """Expand globs, deduplicate, and validate that files exist.

    Raises FileNotFoundError if a non-glob path doesn't exist.
    Raises FileNotFoundError if expansion produces zero files.
    """
    expanded = []
    seen = set()

    for raw in raw_paths:
        if any(c in raw for c in ("*", "?", "[")):
            candidates = sorted(glob.glob(raw))
        else:
            if not os.path.isfile(raw):
                raise FileNotFoundError(f"File not found: {raw}")
            candidates = [raw]
        for path in candidates:
            if path not in seen:
                seen.add(path)
                expanded.append(path)

    if not expanded:
        raise FileNotFoundError("No log files found matching the given paths")

    return expanded


def read_text(paths: list[str]) -> str:
    """Concatenate the files in order, one log stream. Undecodable bytes become U+FFFD."""
    chunks = []
    for path in paths:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            text = f.read()
        if text and not text.endswith("\n"):
            text += "\n"
        chunks.append(text)
    return "".join(chunks)


def read_stdin() -> str:
    return sys.stdin.read()
