"""
Console output utilities.

This module provides functions for formatted console output used
throughout the CLI application.
"""

from .constants import BANNER_LINES, EMOJI_ERROR, HEADER_WIDTH


def print_error(message: str) -> None:
    """Print error message with emoji."""
    print(f"{EMOJI_ERROR} {message}")


def print_section_header(title: str, leading_blank: bool = True) -> None:
    """
    Print a boxed section header.

    Args:
        title: Header line, printed as given including its padding
        leading_blank: Emit an empty line before the first rule
    """
    rule = "=" * HEADER_WIDTH
    if leading_blank:
        print()
    print(rule)
    print(title)
    print(rule)
    print()


def print_banner() -> None:
    """Print the welcome banner shown on every run."""
    for line in BANNER_LINES:
        print(line)
    print()
