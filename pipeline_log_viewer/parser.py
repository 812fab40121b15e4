"""Pipeline log line parser: compiled regex + body decoding.

Line format:
    <pipeline_id> <id> <encoding> [<body>] <next_id>

Encoding 0 keeps the body as-is, encoding 1 decodes it from hex ASCII.
Any other encoding keeps the record but replaces its body with a marker.
"""

import logging
import re
from dataclasses import dataclass, field

from pipeline_log_viewer.models import ENCODING_HEX, ENCODING_PLAIN, PipelineMessage

logger = logging.getLogger(__name__)

LOG_PATTERN = re.compile(
    r"^(\S+)\s+(\S+)\s+(\d+)\s+\[([^\]]*)\]\s+(\S+)\s*$"
)

_HEX_RE = re.compile(r"^(?:[0-9A-Fa-f]{2})*$")

# only CR and LF end a line; form feeds and other separators stay in the body
_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")

INVALID_ENCODING = "Invalid encoding"
INVALID_HEX_ENCODING = "Invalid hex encoding"


@dataclass(frozen=True)
class SkippedLine:
    line_no: int
    raw: str


@dataclass
class ParseResult:
    messages: list[PipelineMessage] = field(default_factory=list)
    skipped: list[SkippedLine] = field(default_factory=list)

    @property
    def total_lines(self) -> int:
        return len(self.messages) + len(self.skipped)


def decode_hex(text: str) -> str:
    """Decode a hex ASCII string. Returns INVALID_HEX_ENCODING on any failure."""
    # bytes.fromhex tolerates whitespace between pairs, the wire format does not
    if not _HEX_RE.match(text):
        return INVALID_HEX_ENCODING
    try:
        return bytes.fromhex(text).decode("ascii")
    except (ValueError, UnicodeDecodeError):
        return INVALID_HEX_ENCODING


def decode_body(body: str, encoding: int) -> str:
    if encoding == ENCODING_PLAIN:
        return body
    if encoding == ENCODING_HEX:
        return decode_hex(body)
    return INVALID_ENCODING


def is_invalid_encoding(message: PipelineMessage) -> bool:
    return message.encoding not in (ENCODING_PLAIN, ENCODING_HEX)


def is_invalid_hex(message: PipelineMessage) -> bool:
    return message.encoding == ENCODING_HEX and message.body == INVALID_HEX_ENCODING


def is_decode_failure(message: PipelineMessage) -> bool:
    """True when the body is a decode-failure marker rather than log text."""
    return is_invalid_encoding(message) or is_invalid_hex(message)


def parse_line(line: str) -> PipelineMessage | None:
    """Parse a single log line into a PipelineMessage. Returns None for malformed lines."""
    match = LOG_PATTERN.match(line.strip())
    if not match:
        return None

    pipeline_id, message_id, encoding_str, body, next_id = match.groups()
    encoding = int(encoding_str)

    return PipelineMessage(
        pipeline_id=pipeline_id,
        id=message_id,
        body=decode_body(body, encoding),
        next_id=next_id,
        encoding=encoding,
    )


def parse_lines(text: str) -> ParseResult:
    """Parse every non-blank line of *text*, keeping input order.

    Malformed lines never abort parsing; they are collected in
    ``ParseResult.skipped`` with their 1-based line number.
    """
    result = ParseResult()
    for line_no, line in enumerate(_LINE_BREAK_RE.split(text), start=1):
        if not line.strip():
            continue
        message = parse_line(line)
        if message is None:
            logger.debug("Skipping malformed line %d: %r", line_no, line)
            result.skipped.append(SkippedLine(line_no=line_no, raw=line))
            continue
        result.messages.append(message)
    return result
