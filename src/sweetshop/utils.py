"""
src/sweetshop/utils.py - utility functions

General-purpose helpers shared by config and display code.
"""

from typing import Any


def truncate_string(s: str, max_length: int = 100, suffix: str = "...") -> str:
    """
    Cut a string down to max_length characters

    Args:
        s: String to truncate
        max_length: Maximum length including the suffix
        suffix: Appended when the string is cut

    Returns:
        The truncated string
    """
    if len(s) <= max_length:
        return s
    return s[: max_length - len(suffix)] + suffix


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """
    Deep merge two dictionaries

    Nested dictionaries are copied, so neither input is modified.

    Args:
        base: Base dictionary
        override: Dictionary with overriding values

    Returns:
        Merged dictionary
    """
    result = {
        key: deep_merge(value, {}) if isinstance(value, dict) else value
        for key, value in base.items()
    }
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result
