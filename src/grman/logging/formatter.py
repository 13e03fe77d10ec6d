"""Plain-text block formatter for grman log files.

Each record becomes one block headed by `=== <event> ===` with one
`key: value` line per field. Blocks are separated by a blank line.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from typing import Any

# Leading keys of every block; each event then lists its own fields.
COMMON_KEYS: tuple[str, ...] = ("ts", "level")
EVENT_FIELDS: dict[str, tuple[str, ...]] = {
    "grammar_loaded": ("grammar_file", "options", "commands"),
    "page_rendered": ("page", "kind", "chars"),
    "command_not_found": ("command",),
}
PLAIN_FIELDS: tuple[str, ...] = ("logger", "message")


def _decode_event(message: str) -> dict[str, Any] | None:
    """Return the payload of a log_event() message, or None for plain text."""
    if not (message.startswith("{") and message.endswith("}")):
        return None
    try:
        payload = json.loads(message)
    except json.JSONDecodeError:
        return None
    return payload if isinstance(payload, dict) else None


class StructuredTextFormatter(logging.Formatter):
    """Render log records as `=== event ===` blocks."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._emitted = False

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        fields = _decode_event(message)
        if fields is None:
            event = record.name
            fields = {"message": message}
        else:
            event = str(fields.pop("event", record.name))

        fields.setdefault(
            "ts", datetime.fromtimestamp(record.created).astimezone().isoformat()
        )
        fields["level"] = record.levelname
        fields.setdefault("logger", record.name)

        lines = [f"=== {event} ==="]
        for key in _key_order(event, fields):
            lines.append(f"{key}: {_one_line(fields[key])}")
        if record.exc_info:
            lines += ["traceback:", self.formatException(record.exc_info)]

        block = "\n".join(lines)
        if self._emitted:
            return "\n" + block
        self._emitted = True
        return block


def _one_line(value: Any) -> str:
    return str(value).replace("\n", "\\n")


def _key_order(event: str, fields: dict[str, Any]) -> list[str]:
    leading = COMMON_KEYS + EVENT_FIELDS.get(event, PLAIN_FIELDS)
    keys = [key for key in leading if fields.get(key) is not None]
    keys += sorted(
        key for key, value in fields.items() if key not in leading and value is not None
    )
    return keys
