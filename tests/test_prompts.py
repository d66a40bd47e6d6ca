"""
Tests for shared prompt construction and reply parsing.
"""

import pytest

from katasumi.exceptions import LLMResponseError
from katasumi.llm.prompts import (
    build_explain_prompt,
    build_search_prompt,
    extract_json_object,
    parse_explain_reply,
    parse_search_reply,
)
from katasumi.models import Platform


class TestExtractJsonObject:
    """Tests for locating JSON inside model replies."""

    def test_bare_object(self):
        assert extract_json_object('{"a": 1}') == '{"a": 1}'

    def test_wrapped_in_prose(self):
        """Test JSON surrounded by chatter is found."""
        reply = 'Sure! Here you go:\n{"rankedShortcuts": ["1"]}\nHope that helps {:'
        assert extract_json_object(reply) == '{"rankedShortcuts": ["1"]}'

    def test_nested_and_string_braces(self):
        """Test nested objects and braces inside strings are balanced correctly."""
        reply = 'x {"explanation": "press } then {", "meta": {"k": "v"}} y'
        assert extract_json_object(reply) == '{"explanation": "press } then {", "meta": {"k": "v"}}'

    def test_no_object(self):
        with pytest.raises(LLMResponseError):
            extract_json_object("not json")

    def test_unbalanced(self):
        with pytest.raises(LLMResponseError):
            extract_json_object('{"rankedShortcuts": ["1"')


class TestParseReplies:
    """Tests for mode-specific reply validation."""

    def test_search_reply(self):
        """Test ranked IDs are returned as strings in order."""
        assert parse_search_reply('{"rankedShortcuts": ["2", 1, "3"]}') == ["2", "1", "3"]

    def test_search_reply_missing_key(self):
        with pytest.raises(LLMResponseError):
            parse_search_reply('{"ranked": ["1"]}')

    def test_search_reply_not_a_list(self):
        with pytest.raises(LLMResponseError):
            parse_search_reply('{"rankedShortcuts": "1,2"}')

    def test_search_reply_invalid_json(self):
        with pytest.raises(LLMResponseError):
            parse_search_reply("{rankedShortcuts: [1]}")

    def test_explain_reply(self):
        reply = 'Answer: {"explanation": " Splits the window. "}'
        assert parse_explain_reply(reply) == "Splits the window."

    def test_explain_reply_wrong_type(self):
        with pytest.raises(LLMResponseError):
            parse_explain_reply('{"explanation": 42}')

    def test_explain_reply_empty(self):
        with pytest.raises(LLMResponseError):
            parse_explain_reply('{"explanation": ""}')


class TestBuildPrompts:
    """Tests for prompt text."""

    def test_search_prompt_lists_candidates(self, shortcuts):
        """Test every candidate's id, action, app, keys and tags are listed."""
        prompt = build_search_prompt("split window", shortcuts[4:6], 3)
        assert '"split window"' in prompt
        assert "ID: 5, Action: Split pane horizontally, App: tmux" in prompt
        assert '"mac": "Ctrl+w v"' in prompt
        assert "Tags: split, window, vertical" in prompt
        assert "Limit to 3 results." in prompt
        assert '"rankedShortcuts"' in prompt

    def test_explain_prompt_uses_platform_keys(self, shortcuts):
        """Test the explain prompt resolves keys for the requested platform."""
        vscode_copy = shortcuts[2]
        assert "Keys: Ctrl+C" in build_explain_prompt(vscode_copy, Platform.WINDOWS)
        assert "Keys: Cmd+C" in build_explain_prompt(vscode_copy)
        prompt = build_explain_prompt(shortcuts[0], Platform.WINDOWS)
        assert "Keys: N/A" in prompt
        assert "Context: Normal Mode" in prompt
        assert '"explanation"' in prompt
