"""
String case conversion utilities for declaration naming.

Based on https://github.com/okunishinishi/python-stringcase
with identifier normalisation for generated names.
"""

import re
from collections.abc import Callable
from typing import Final

# Regex patterns for case conversion
_SNAKE_CASE_DELIMITER_PATTERN: Final = re.compile(r"[\-\.\s/]")
_ACRONYM_PATTERN: Final = re.compile(r"([A-Z])([A-Z][a-z])")
_LOWER_UPPER_PATTERN: Final = re.compile(r"([a-z0-9])([A-Z])")
_NON_IDENTIFIER_PATTERN: Final = re.compile(r"[^a-zA-Z0-9_]")


def _convert_if_not_empty(string: str | None, conversion_func: Callable[[str], str]) -> str:
    """Safely convert a string, returning empty string if input is None or empty."""
    return conversion_func(string) if string else ""


def snakecase(string: str | None) -> str:
    """Convert string into snake_case.

    Handles various formats including camelCase with acronyms.

    Args:
        string: String to convert.

    Returns:
        Snake case string.

    Examples:
        >>> snakecase("HelloWorld")
        'hello_world'
        >>> snakecase("hello-world")
        'hello_world'
        >>> snakecase("getHTTPResponse")
        'get_http_response'
    """

    def _snakecase(s: str) -> str:
        s = _SNAKE_CASE_DELIMITER_PATTERN.sub("_", s)
        s = _ACRONYM_PATTERN.sub(r"\1_\2", s)
        s = _LOWER_UPPER_PATTERN.sub(r"\1_\2", s)
        return s.lower()

    return _convert_if_not_empty(string, _snakecase)


def pascalcase(string: str | None) -> str:
    """Convert string into PascalCase.

    Args:
        string: String to convert.

    Returns:
        PascalCase string.

    Examples:
        >>> pascalcase("hello_world")
        'HelloWorld'
        >>> pascalcase("hello-world")
        'HelloWorld'
        >>> pascalcase("getHTTPResponse")
        'GetHttpResponse'
    """

    def _pascalcase(s: str) -> str:
        return "".join(word.capitalize() for word in snakecase(s).split("_"))

    return _convert_if_not_empty(string, _pascalcase)


def normalize_identifier(name: str | None) -> str:
    """Normalize name to be a valid identifier in common target languages.

    - Replaces invalid characters with underscores
    - Ensures it doesn't start with a digit

    Args:
        name: The string to normalize.

    Returns:
        A valid identifier.

    Examples:
        >>> normalize_identifier("123invalid")
        '_123invalid'
        >>> normalize_identifier("valid@name")
        'valid_name'
    """

    def _normalize(s: str) -> str:
        normalized = _NON_IDENTIFIER_PATTERN.sub("_", s)
        if normalized and normalized[0].isdigit():
            normalized = f"_{normalized}"
        return normalized

    return _convert_if_not_empty(name, _normalize)
