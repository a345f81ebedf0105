"""Output formatting of call outcomes for console and JSON."""

import json
from dataclasses import fields, is_dataclass
from enum import Enum
from typing import Any, Protocol

import numpy as np

from spicebridge.domain.models.results import Failure, NotFound, Success
from spicebridge.domain.models.units import Quantity


def to_plain(value: Any) -> Any:
    """Reduce typed values to JSON-friendly builtins. Quantities become their canonical float."""
    if isinstance(value, Quantity):
        return float(value)
    if isinstance(value, Enum):
        return value.value
    if is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_plain(getattr(value, f.name)) for f in fields(value)}
    if isinstance(value, np.ndarray):
        return value.tolist()
    if isinstance(value, np.generic):
        return value.item()
    if isinstance(value, (list, tuple)):
        return [to_plain(v) for v in value]
    if isinstance(value, dict):
        return {k: to_plain(v) for k, v in value.items()}
    return value


def _format_floats(value: Any, precision: int) -> Any:
    if isinstance(value, float):
        return round(value, precision)
    if isinstance(value, dict):
        return {k: _format_floats(v, precision) for k, v in value.items()}
    if isinstance(value, list):
        return [_format_floats(v, precision) for v in value]
    return value


def _build_output_dict(outcome: Success | NotFound | Failure) -> dict:
    match outcome:
        case Success(value=value):
            return {"status": "success", "value": to_plain(value)}
        case NotFound(what=what):
            return {"status": "not_found", "what": what}
        case Failure(code=code, message=message, explain=explain):
            return {
                "status": "failure",
                "code": code,
                "message": message,
                "explain": explain,
            }
    raise TypeError(f"Not a call outcome: {outcome!r}")


class OutputFormatter(Protocol):
    """Protocol for output formatting strategies"""

    def format_result(self, outcome: Success | NotFound | Failure, title: str = "") -> str:
        """Render a call outcome"""
        ...


class ConsoleOutputFormatter:
    """Human-readable rendering of call outcomes"""

    def __init__(self, precision: int = 6):
        self.precision = precision

    def format_result(self, outcome: Success | NotFound | Failure, title: str = "") -> str:
        output_dict = _build_output_dict(outcome)
        lines = []
        if title:
            lines.append(title)
            lines.append("=" * len(title))

        status = output_dict["status"]
        if status == "success":
            lines.extend(self._value_lines(_format_floats(output_dict["value"], self.precision)))
        elif status == "not_found":
            what = output_dict["what"]
            lines.append(f"Not found{': ' + what if what else ''}")
        else:
            lines.append(f"Error: {output_dict['code']}")
            if output_dict["message"]:
                lines.append(f"  {output_dict['message']}")
            if output_dict["explain"]:
                lines.append(f"  ({output_dict['explain']})")
        return "\n".join(lines)

    def _value_lines(self, value: Any, indent: str = "") -> list[str]:
        if isinstance(value, dict):
            lines = []
            for key, item in value.items():
                if isinstance(item, (dict, list)):
                    lines.append(f"{indent}{key}:")
                    lines.extend(self._value_lines(item, indent + "  "))
                else:
                    lines.append(f"{indent}{key}: {item}")
            return lines
        if isinstance(value, list):
            if all(not isinstance(v, (dict, list)) for v in value):
                return [f"{indent}{value}"]
            lines = []
            for item in value:
                lines.extend(self._value_lines(item, indent + "- "))
            return lines
        return [f"{indent}{value}"]


class JSONOutputFormatter:
    """Format call outcomes as JSON (for automation)"""

    def format_result(self, outcome: Success | NotFound | Failure, title: str = "") -> str:
        output_dict = _build_output_dict(outcome)
        if title:
            output_dict = {"call": title, **output_dict}
        return json.dumps(output_dict, indent=2)
