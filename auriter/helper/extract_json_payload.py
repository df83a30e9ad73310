"""
Description:
Locate a JSON payload embedded in free-form model output.

Models asked for "only JSON" still wrap it in commentary or <think> blocks.
This module strips reasoning tags and slices out the first top-level array or
object so it can be handed to json.loads.

Arguments:
- content: The raw text returned by the text generation call.
- opening: "[" for an array payload, "{" for an object payload.

Returns:
- The parsed JSON value, or None when no parseable payload was found.

Dependencies:
- json: For strict parsing of the extracted payload.
- auriter.constants.regex_patterns: For the precompiled think-tag patterns.

"""
import json
import logging
from typing import Any, Optional
from auriter.constants.regex_patterns import REGEX_PATTERNS

logger = logging.getLogger(__name__)

_CLOSING = {"[": "]", "{": "}"}


def strip_reasoning(content: str) -> str:
    """Remove <think>...</think> blocks and stray think tags."""
    content = REGEX_PATTERNS['think_block'].sub('', content)
    content = REGEX_PATTERNS['think_tag'].sub('', content)
    return content.strip()


def greedy_slice(content: str, opening: str) -> Optional[str]:
    """First opening bracket to the last matching closing bracket."""
    start = content.find(opening)
    end = content.rfind(_CLOSING[opening])
    if start == -1 or end < start:
        return None
    return content[start:end + 1]


def balanced_slice(content: str, opening: str) -> Optional[str]:
    """First opening bracket to the bracket that closes it, ignoring brackets inside strings."""
    closing = _CLOSING[opening]
    start = content.find(opening)
    if start == -1:
        return None

    depth = 0
    in_string = False
    escaped = False
    for i in range(start, len(content)):
        char = content[i]
        if in_string:
            if escaped:
                escaped = False
            elif char == '\\':
                escaped = True
            elif char == '"':
                in_string = False
            continue
        if char == '"':
            in_string = True
        elif char == opening:
            depth += 1
        elif char == closing:
            depth -= 1
            if depth == 0:
                return content[start:i + 1]
    return None


def extract_json_payload(content: Any, opening: str) -> Optional[Any]:
    if not isinstance(content, str) or not content.strip():
        return None

    cleaned = strip_reasoning(content)

    for candidate in (greedy_slice(cleaned, opening), balanced_slice(cleaned, opening)):
        if candidate is None:
            continue
        try:
            return json.loads(candidate)
        except (json.JSONDecodeError, RecursionError) as e:
            logger.debug(f"Candidate payload did not parse: {e}")

    logger.warning(f"No parseable JSON payload found in model output: {cleaned[:100]}...")
    return None
