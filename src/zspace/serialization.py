"""
JSON encoding shared by the zspace value types, and the parser for the pretty
``zr[start:end, ...]`` range form.
"""

import json
import re
from typing import Any

from .config import config

_RANGE_RE = re.compile(r"^zr\[(?P<body>.*)\]$", re.DOTALL)


def dumps(data: Any, pretty: bool = False) -> str:
    """
    Serialize JSON data, keeping field order. ``pretty`` uses the ``json_indent``
    config option, falling back to two spaces.
    """
    if pretty:
        indent = config["json_indent"]
        return json.dumps(data, indent=2 if indent is None else indent)
    return json.dumps(data, separators=(",", ":"))


def loads(text: str, what: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f'Invalid {what}: "{text}"') from e


def parse_range_string(text: str) -> tuple[list[int], list[int]]:
    """
    Parse ``"zr[2:4, 3:5]"`` into ``([2, 3], [4, 5])``.

    Raises:
        ValueError: If ``text`` is not in the pretty range form.
    """
    m = _RANGE_RE.match(text.strip())
    if m is None:
        raise ValueError(f'Invalid ZRange: "{text}"')
    body = m.group("body").strip()
    if not body:
        return [], []

    start, end = [], []
    for part in body.split(","):
        bounds = part.split(":")
        if len(bounds) != 2:
            raise ValueError(f'Invalid ZRange: "{text}"')
        try:
            start.append(int(bounds[0].strip()))
            end.append(int(bounds[1].strip()))
        except ValueError as e:
            raise ValueError(f'Invalid ZRange: "{text}"') from e
    return start, end
