"""
Line tokenizer for the console command loop.

Splits a raw input line into tokens, honoring double quotes and backslash
escapes. Only the space character separates tokens.
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

from typing import List, Optional, Tuple

ESCAPE_CHAR = "\\"
QUOTE_CHAR = '"'
SEPARATOR = " "


def tokenize(line: str) -> List[str]:
    """
    Split a line into tokens.

    Rules, applied left to right:
    - A backslash makes the next character literal, whatever it is.
    - A double quote opens or closes a quoted run. Closing a quote always
      ends the current token, even if non-space characters follow.
    - A space outside quotes separates tokens; inside quotes it is content.
    - Empty tokens are never produced.

    An unterminated quote or a trailing backslash is not an error: whatever
    has been accumulated is returned as the final token.

    Args:
        line: Raw input line

    Returns:
        Ordered list of tokens (possibly empty)
    """
    tokens: List[str] = []
    buffer: List[str] = []

    def flush() -> None:
        if buffer:
            tokens.append("".join(buffer))
            buffer.clear()

    escaping = False
    in_quotes = False

    for char in line:
        if escaping:
            buffer.append(char)
            escaping = False
        elif char == ESCAPE_CHAR:
            escaping = True
        elif char == QUOTE_CHAR:
            if in_quotes:
                in_quotes = False
                flush()
            else:
                in_quotes = True
        elif char == SEPARATOR and not in_quotes:
            flush()
        else:
            buffer.append(char)

    flush()
    return tokens


def split_command(tokens: List[str]) -> Tuple[Optional[str], List[str]]:
    """
    Split tokens into a lowercased command name and its arguments.

    Returns:
        ``(command, arguments)``, or ``(None, [])`` when there are no tokens
    """
    if not tokens:
        return None, []
    return tokens[0].lower(), list(tokens[1:])
