"""
Stream Frame Decoder - Infrastructure Layer

Incrementally turns the chunked body of the Nomad event stream into frames.
Nomad writes one JSON object per line, but objects may also arrive
concatenated or split across any number of chunks.
"""

import codecs
import json
import re
from typing import Any, List, Optional

import structlog
from pydantic import ValidationError

from overseer.infrastructure.gateways.nomad.models import NomadStreamFrame

logger = structlog.get_logger(__name__)

_WHITESPACE = " \t\r\n"

# Frames are written back to back, so "}{" only occurs between two of them
# or inside a string.
_OBJECT_BOUNDARY = re.compile(r"\}[ \t\r]*\{")


class StreamFrameDecoder:
    """
    Decode stream frames from byte chunks.

    A malformed object is logged and skipped. Decoding resumes at the next
    object on the same line when one follows it, otherwise at the next
    newline.
    """

    def __init__(self) -> None:
        self._text = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self._json = json.JSONDecoder()
        self._buffer = ""

    @property
    def pending(self) -> str:
        """Text received but not yet decoded."""
        return self._buffer

    def feed(self, chunk: bytes) -> List[NomadStreamFrame]:
        """Add a chunk and return every frame it completes."""
        self._buffer += self._text.decode(chunk)
        frames: List[NomadStreamFrame] = []

        newline = self._buffer.rfind("\n")
        if newline != -1:
            lines, self._buffer = self._buffer[:newline], self._buffer[newline + 1 :]
            for line in lines.split("\n"):
                frames.extend(self._decode_line(line))

        frames.extend(self._decode_partial())
        return frames

    def flush(self) -> List[NomadStreamFrame]:
        """Decode whatever is left once the stream has ended."""
        self._buffer += self._text.decode(b"", final=True)
        remainder, self._buffer = self._buffer, ""
        return self._decode_line(remainder)

    def _decode_line(self, line: str) -> List[NomadStreamFrame]:
        frames: List[NomadStreamFrame] = []
        position = _skip_whitespace(line, 0)

        while position < len(line):
            try:
                value, end = self._json.raw_decode(line, position)
            except json.JSONDecodeError as e:
                resume = _next_object(line, e)
                logger.error(
                    "nomad.stream.decode_error",
                    error=str(e),
                    skipped=line[position : min(resume or len(line), position + 200)],
                )
                if resume is None:
                    break
                position = resume
                continue

            frame = _to_frame(value)
            if frame is not None:
                frames.append(frame)
            position = _skip_whitespace(line, end)

        return frames

    def _decode_partial(self) -> List[NomadStreamFrame]:
        """Decode complete objects at the head of an unterminated line."""
        frames: List[NomadStreamFrame] = []
        position = _skip_whitespace(self._buffer, 0)

        while position < len(self._buffer):
            try:
                value, end = self._json.raw_decode(self._buffer, position)
            except json.JSONDecodeError as e:
                resume = _next_object(self._buffer, e)
                if resume is None:
                    # Incomplete object; wait for more data or the line end.
                    break
                logger.error(
                    "nomad.stream.decode_error",
                    error=str(e),
                    skipped=self._buffer[position : min(resume, position + 200)],
                )
                position = resume
                continue
            if not isinstance(value, dict):
                # A scalar may still be growing.
                break

            frame = _to_frame(value)
            if frame is not None:
                frames.append(frame)
            position = _skip_whitespace(self._buffer, end)

        self._buffer = self._buffer[position:]
        return frames


def _next_object(text: str, error: json.JSONDecodeError) -> Optional[int]:
    """Start of the first object after a decode failure, if it has arrived."""
    if error.msg.startswith("Unterminated string"):
        return None
    match = _OBJECT_BOUNDARY.search(text, error.pos)
    return match.end() - 1 if match else None


def _skip_whitespace(text: str, position: int) -> int:
    while position < len(text) and text[position] in _WHITESPACE:
        position += 1
    return position


def _to_frame(value: Any) -> Optional[NomadStreamFrame]:
    if not isinstance(value, dict):
        logger.error("nomad.stream.decode_error", error="frame is not an object")
        return None
    try:
        return NomadStreamFrame.model_validate(value)
    except ValidationError as e:
        logger.error("nomad.stream.frame_invalid", error=str(e))
        return None
