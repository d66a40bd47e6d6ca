"""
Shared Prompts and Reply Parsing

Prompt construction and reply parsing used by every provider adapter.
Models are asked for a bare JSON object but often wrap it in prose, so
replies are scanned for the first balanced {...} before decoding.
"""

import json
from typing import Any, Optional, Sequence

from katasumi.exceptions import LLMResponseError
from katasumi.models import Platform, Shortcut

SYSTEM_PROMPT = "You are a helpful assistant that understands keyboard shortcuts."


def build_search_prompt(query: str, shortcuts: Sequence[Shortcut], max_results: int) -> str:
    """Build the ranking prompt listing every candidate."""
    lines = []
    for idx, s in enumerate(shortcuts):
        lines.append(
            f"{idx}. ID: {s.id}, Action: {s.action}, App: {s.app}, "
            f"Keys: {json.dumps(s.keys.to_dict())}, Tags: {', '.join(s.tags)}"
        )
    shortcuts_desc = "\n".join(lines)

    return f"""Given the search query "{query}", rank the following keyboard shortcuts by relevance.
Return ONLY a JSON object with a "rankedShortcuts" array containing the shortcut IDs in order of relevance (most relevant first).
Limit to {max_results} results.

Shortcuts:
{shortcuts_desc}

Response format:
{{
  "rankedShortcuts": ["id1", "id2", "id3", ...]
}}"""


def build_explain_prompt(shortcut: Shortcut, platform: Optional[Platform] = None) -> str:
    """Build the one-sentence explanation prompt."""
    key_combo = shortcut.keys.resolve(platform)

    return f"""Explain what this keyboard shortcut does in plain, simple English (one sentence):

App: {shortcut.app}
Action: {shortcut.action}
Keys: {key_combo or 'N/A'}
Context: {shortcut.context or 'Any'}
Tags: {', '.join(shortcut.tags)}

Return ONLY a JSON object with an "explanation" field containing the plain English description.

Response format:
{{
  "explanation": "Your explanation here"
}}"""


def extract_json_object(text: str) -> str:
    """
    Return the first balanced {...} substring of a model reply.

    Braces inside JSON string literals are ignored while balancing.

    Raises:
        LLMResponseError: No opening brace, or it is never closed
    """
    start = text.find("{")
    if start == -1:
        raise LLMResponseError("No JSON found in AI response")

    depth = 0
    in_string = False
    escaped = False
    for i in range(start, len(text)):
        ch = text[i]
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
            continue
        if ch == '"':
            in_string = True
        elif ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return text[start:i + 1]

    raise LLMResponseError("Unbalanced JSON object in AI response")


def _load_object(text: str) -> dict[str, Any]:
    fragment = extract_json_object(text)
    try:
        parsed = json.loads(fragment)
    except ValueError as e:
        raise LLMResponseError(f"Failed to parse AI response: {e}") from e
    if not isinstance(parsed, dict):
        raise LLMResponseError("AI response is not a JSON object")
    return parsed


def parse_search_reply(text: str) -> list[str]:
    """
    Extract ranked shortcut IDs from a search-mode reply.

    Raises:
        LLMResponseError: Missing or non-list "rankedShortcuts"
    """
    parsed = _load_object(text)
    ranked = parsed.get("rankedShortcuts")
    if not isinstance(ranked, list):
        raise LLMResponseError("Invalid search response format")
    # IDs may come back as numbers; compare as strings
    return [str(item) for item in ranked if isinstance(item, (str, int)) and not isinstance(item, bool)]


def parse_explain_reply(text: str) -> str:
    """
    Extract the explanation sentence from an explain-mode reply.

    Raises:
        LLMResponseError: Missing, empty, or non-string "explanation"
    """
    parsed = _load_object(text)
    explanation = parsed.get("explanation")
    if not isinstance(explanation, str) or not explanation.strip():
        raise LLMResponseError("Invalid explain response format")
    return explanation.strip()
