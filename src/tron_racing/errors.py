"""
tron_racing.errors — Custom exception classes
==============================================

Defines the exception hierarchy for the outer surface of the package
(configuration loading and event decoding). The racing core itself never
raises: absence is reported through ``None``/``False`` results.
Each exception stores full context for structured logging.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional
import json


class TronRacingError(Exception):
    """Base exception for all tron_racing package errors."""
    pass


class ConfigurationError(TronRacingError):
    """Raised when configuration values fail validation."""

    def __init__(self, source: str, errors: List[str]):
        self.source = source
        self.errors = errors
        super().__init__(f"Invalid configuration from {source}: {errors}")

    def format_error_log(self) -> str:
        return _format_error_block(
            error_type="CONFIGURATION_ERROR",
            subject=self.source,
            payload=None,
            errors=self.errors,
        )


class EventFormatError(TronRacingError):
    """Raised when an event record cannot be delivered to a listener."""

    def __init__(
        self,
        event_name: str,
        record: Any,
        reason: str,
    ):
        self.event_name = event_name
        self.record = record
        self.reason = reason
        super().__init__(f"Malformed event '{event_name}': {reason}")

    def format_error_log(self) -> str:
        payload = self.record if isinstance(self.record, dict) else {"raw": repr(self.record)}
        return _format_error_block(
            error_type="EVENT_FORMAT_ERROR",
            subject=self.event_name or "<unnamed>",
            payload=payload,
            errors=[self.reason],
        )


def _format_error_block(
    error_type: str,
    subject: str,
    payload: Optional[Dict[str, Any]],
    errors: Optional[List[str]],
) -> str:
    """Format a structured error block for terminal output."""
    from datetime import datetime, timezone

    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"

    lines = [
        "",
        "=" * 64,
        " TRON RACING ERROR",
        "=" * 64,
        f" Timestamp:    {timestamp}",
        f" Error Type:   {error_type}",
        f" Subject:      {subject}",
    ]

    if payload is not None:
        lines.append("")
        lines.append(" ── RECORD " + "─" * 53)
        lines.append(_indent_json(payload))

    if errors:
        lines.append("")
        lines.append(" ── ERRORS " + "─" * 53)
        for error in errors:
            lines.append(f" • {error}")

    lines.append("")
    lines.append("=" * 64)
    lines.append("")

    return "\n".join(lines)


def _indent_json(data: Dict[str, Any], indent: int = 2) -> str:
    """Format JSON with indentation for error logs."""
    try:
        formatted = json.dumps(data, indent=indent, default=str)
        return "\n".join(" " + line for line in formatted.split("\n"))
    except (TypeError, ValueError):
        return f" {repr(data)}"
