"""wp-cli output parser.

wp-cli prints PHP notices, deprecations and ANSI colour codes around the
payload it was asked for. This module recovers the structured part.
It never runs commands.
"""

import json
import re
from typing import Any

ANSI_RE = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
NOISE_PREFIXES = (
    "PHP Warning:",
    "PHP Notice:",
    "PHP Deprecated:",
    "PHP Fatal error:",
    "Warning:",
    "Notice:",
    "Deprecated:",
    "Fatal error:",
)


def strip_noise(text: str) -> str:
    """Remove ANSI codes and PHP/wp-cli notice lines."""
    lines = []
    for line in ANSI_RE.sub("", text).lstrip("\ufeff").splitlines():
        stripped = line.strip()
        if not stripped:
            continue
        if stripped.startswith(NOISE_PREFIXES):
            continue
        lines.append(stripped)
    return "\n".join(lines)


def extract_json_blob(text: str) -> str | None:
    """Return the first balanced JSON object/array found in text, or None."""
    if not text:
        return None
    lb = text.find("[")
    lb2 = text.find("{")
    if lb == -1 and lb2 == -1:
        return None
    if lb == -1 or (lb2 != -1 and lb2 < lb):
        start, open_c, close_c = lb2, "{", "}"
    else:
        start, open_c, close_c = lb, "[", "]"

    depth = 0
    in_str = False
    esc = False
    for i in range(start, len(text)):
        ch = text[i]
        if in_str:
            if esc:
                esc = False
            elif ch == "\\":
                esc = True
            elif ch == '"':
                in_str = False
            continue
        if ch == '"':
            in_str = True
        elif ch == open_c:
            depth += 1
        elif ch == close_c:
            depth -= 1
            if depth == 0:
                return text[start : i + 1]
    return None


def parse_output(text: str) -> Any:
    """Parse wp-cli output into Python data.

    Order:
      1) JSON container ({...} or [...]) anywhere in the cleaned text.
      2) A single line: JSON scalar if it decodes, else the raw string.
      3) Several lines (``--field=ID`` porcelain): list of tokens, digits as int.

    Empty output yields an empty list so enumerate-then-delete callers
    can iterate unconditionally.
    """
    cleaned = strip_noise(text or "")
    if not cleaned:
        return []

    blob = extract_json_blob(cleaned)
    if blob is not None:
        try:
            return json.loads(blob)
        except json.JSONDecodeError:
            pass

    lines = cleaned.splitlines()
    if len(lines) == 1:
        try:
            return json.loads(lines[0])
        except json.JSONDecodeError:
            return lines[0]

    return [int(line) if line.isdigit() else line for line in lines]
