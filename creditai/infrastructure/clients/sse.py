"""Incremental parser for OpenAI-style server-sent event streams."""

import json
from typing import List

DATA_PREFIX = "data: "
DONE_SENTINEL = "[DONE]"


class SSEDeltaParser:
    """
    Extracts ``choices[0].delta.content`` from a chunked SSE stream.

    Chunks may end mid-line or mid-JSON. Incomplete input stays buffered
    until the next call to ``feed``.
    """

    def __init__(self):
        self._buffer = ""
        self.done = False

    def feed(self, text: str) -> List[str]:
        """
        Consume a decoded chunk and return the deltas it completes.

        Args:
            text: The next piece of the decoded response body

        Returns:
            Content deltas in stream order (possibly empty)
        """
        if self.done:
            return []

        self._buffer += text
        deltas: List[str] = []

        while "\n" in self._buffer:
            line, self._buffer = self._buffer.split("\n", 1)
            if line.endswith("\r"):
                line = line[:-1]

            if not line or line.startswith(":"):
                continue
            if not line.startswith(DATA_PREFIX):
                continue

            payload = line[len(DATA_PREFIX):].strip()
            if payload == DONE_SENTINEL:
                self.done = True
                break

            try:
                parsed = json.loads(payload)
            except json.JSONDecodeError:
                # Wait for the rest of the payload
                self._buffer = line + "\n" + self._buffer
                break

            content = self._extract_content(parsed)
            if content:
                deltas.append(content)

        return deltas

    def flush(self) -> List[str]:
        """Parse whatever is left once the stream has ended."""
        if self.done or not self._buffer.strip():
            return []
        remaining, self._buffer = self._buffer, ""
        deltas: List[str] = []
        for line in remaining.split("\n"):
            line = line.rstrip("\r")
            if not line.startswith(DATA_PREFIX):
                continue
            payload = line[len(DATA_PREFIX):].strip()
            if payload == DONE_SENTINEL:
                self.done = True
                break
            try:
                parsed = json.loads(payload)
            except json.JSONDecodeError:
                continue
            content = self._extract_content(parsed)
            if content:
                deltas.append(content)
        return deltas

    @staticmethod
    def _extract_content(parsed: object) -> str:
        if not isinstance(parsed, dict):
            return ""
        choices = parsed.get("choices") or []
        if not choices or not isinstance(choices[0], dict):
            return ""
        delta = choices[0].get("delta") or {}
        content = delta.get("content") if isinstance(delta, dict) else None
        return content if isinstance(content, str) else ""
