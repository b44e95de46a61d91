"""
JSON extraction from model replies.

Models are told to return bare JSON but often wrap it in prose or code
fences. The first balanced top-level {...} span is taken, with string
literals respected so braces inside values do not unbalance the scan.
"""

import json
from typing import Any, Optional


def find_first_json_object(content: str) -> Optional[str]:
    """
    Returns the first balanced top-level {...} span of content.

    Falls back to the span from the first "{" to the last "}" when the
    braces never balance. None when content has no "{".
    """
    start = content.find("{")
    if start == -1:
        return None

    depth = 0
    in_string = False
    escaped = False
    for index in range(start, len(content)):
        char = content[index]
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
            continue
        if char == '"':
            in_string = True
        elif char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return content[start:index + 1]

    end = content.rfind("}")
    if end > start:
        return content[start:end + 1]
    return None


def extract_json_object(content: str) -> dict[str, Any]:
    """
    Parses the first JSON object embedded in a model reply.

    Args:
        content: Raw reply text

    Returns:
        Parsed object

    Raises:
        ValueError: No object found, invalid JSON, or JSON that is not an object
    """
    span = find_first_json_object(content or "")
    if span is None:
        raise ValueError("Could not parse AI response as JSON")

    try:
        parsed = json.loads(span)
    except json.JSONDecodeError as e:
        raise ValueError(f"Could not parse AI response as JSON: {e.msg}") from e

    if not isinstance(parsed, dict):
        raise ValueError("AI response JSON is not an object")
    return parsed
