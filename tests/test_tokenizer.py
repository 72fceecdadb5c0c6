#!/usr/bin/env python3
"""
Unit tests for the line tokenizer.
"""

"""
Copyright (c) 2025 Firefly Software Solutions Inc.

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at:

    http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

import pytest

from consolecmd.core.tokenizer import split_command, tokenize


class TestPlainSplitting:
    """Lines without quotes or escapes."""

    @pytest.mark.parametrize(
        "line",
        [
            "greet Alice",
            "  leading and trailing  ",
            "many     spaces   between",
            "single",
            "",
            "UPPER lower MiXeD",
        ],
    )
    def test_matches_split_on_space_runs(self, line):
        """Unquoted input splits on runs of spaces with no empty pieces."""
        assert tokenize(line) == [piece for piece in line.split(" ") if piece]

    def test_whitespace_only(self):
        assert tokenize("   ") == []

    def test_empty_line(self):
        assert tokenize("") == []

    def test_tab_is_content(self):
        """Only the space character separates tokens."""
        assert tokenize("a\tb c") == ["a\tb", "c"]


class TestQuoting:
    """Double-quoted runs."""

    def test_quoted_argument(self):
        assert tokenize('a "b c" d') == ["a", "b c", "d"]

    def test_unterminated_quote_flushes_remaining(self):
        assert tokenize('a "bc') == ["a", "bc"]

    def test_unterminated_quote_keeps_spaces(self):
        assert tokenize('a "b c  ') == ["a", "b c  "]

    def test_closing_quote_ends_token(self):
        """Characters right after a closing quote start a new token."""
        assert tokenize('"ab"cd') == ["ab", "cd"]

    def test_opening_quote_does_not_split(self):
        """An opening quote in the middle of a word continues the same token."""
        assert tokenize('ab"c d"') == ["abc d"]

    def test_empty_quotes_produce_nothing(self):
        assert tokenize('a "" b') == ["a", "b"]

    def test_adjacent_quoted_runs(self):
        assert tokenize('"a b""c d"') == ["a b", "c d"]


class TestEscaping:
    """Backslash escapes."""

    def test_escaped_space(self):
        assert tokenize("a\\ b c") == ["a b", "c"]

    def test_escaped_quotes(self):
        assert tokenize('say \\"hi\\"') == ["say", '"hi"']

    def test_escaped_backslash(self):
        assert tokenize("path C:\\\\dir") == ["path", "C:\\dir"]

    def test_escaped_quote_inside_quotes(self):
        assert tokenize('"a\\"b"') == ['a"b']

    def test_trailing_escape_is_dropped(self):
        assert tokenize("abc\\") == ["abc"]

    def test_lone_backslash(self):
        assert tokenize("\\") == []

    def test_escaped_letter_is_literal(self):
        assert tokenize("\\n") == ["n"]


class TestSplitCommand:
    """Separating the command name from its arguments."""

    def test_command_is_lowercased(self):
        assert split_command(["GREET", "Alice"]) == ("greet", ["Alice"])

    def test_arguments_keep_case_and_order(self):
        assert split_command(["cmd", "B", "a", "C"]) == ("cmd", ["B", "a", "C"])

    def test_no_tokens(self):
        assert split_command([]) == (None, [])
