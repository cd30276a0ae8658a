"""
CLI package: argument parsing, command routing and the entry point.
"""

from .argument_parser import CLIArgumentParser, create_cli_parser
from .command_router import CommandRouter, create_command_router
from .runner import main

__all__ = [
    "CLIArgumentParser",
    "CommandRouter",
    "create_cli_parser",
    "create_command_router",
    "main",
]
