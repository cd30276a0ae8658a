"""
Command-line interface for the Crypto CLI tool.

Uses focused components for argument parsing and command routing; this
module only wires them together and turns the outcome into an exit status.
"""

import logging

from ..commands.core.command_result import CommandResult
from ..config.client_config import ClientConfig
from ..utilities.console import print_banner, print_error
from ..utilities.logging_config import setup_logging
from .argument_parser import create_cli_parser
from .command_router import create_command_router

logger = logging.getLogger(__name__)

USAGE_ERROR = 2


def main(argv: list[str] | None = None) -> int:
    """
    Main CLI entry point.

    Args:
        argv: Argument list, defaults to ``sys.argv[1:]``

    Returns:
        Process exit status
    """
    setup_logging()
    parser = create_cli_parser()

    print_banner()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return USAGE_ERROR

    try:
        config = ClientConfig.from_env()
    except ValueError as e:
        print_error(f"Invalid configuration: {e}")
        return 1

    router = create_command_router(config)

    try:
        result = router.route_command(args)
    except KeyboardInterrupt:
        print("\n👋 Goodbye!")
        return CommandResult.cancelled("Interrupted by user").exit_code

    if result.is_error():
        logger.debug(f"{args.command} exited with error: {result.error_message}")
    return result.exit_code
