"""
Command result types for standardized command execution results.

Provides consistent result handling across all command implementations
and a single mapping from result to process exit status.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class CommandStatus(Enum):
    """Command execution status."""

    SUCCESS = "success"
    FAILED = "failed"
    CANCELLED = "cancelled"

    def is_success(self) -> bool:
        """Check if status indicates success."""
        return self == CommandStatus.SUCCESS

    def is_error(self) -> bool:
        """Check if status indicates an error."""
        return self == CommandStatus.FAILED


EXIT_CODES = {
    CommandStatus.SUCCESS: 0,
    CommandStatus.FAILED: 1,
    CommandStatus.CANCELLED: 130,
}


@dataclass
class CommandResult:
    """Result of command execution."""

    status: CommandStatus
    data: Any | None = None
    error_message: str | None = None
    error: Exception | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def is_success(self) -> bool:
        """Check if command execution was successful."""
        return self.status.is_success()

    def is_error(self) -> bool:
        """Check if command execution failed."""
        return self.status.is_error()

    @property
    def exit_code(self) -> int:
        """Process exit status for this result."""
        return EXIT_CODES[self.status]

    @classmethod
    def success(cls, data: Any = None, **metadata: Any) -> "CommandResult":
        """Create a successful command result."""
        return cls(status=CommandStatus.SUCCESS, data=data, metadata=dict(metadata))

    @classmethod
    def failure(cls, error: Exception | str) -> "CommandResult":
        """Create a failed command result from an exception or message."""
        if isinstance(error, Exception):
            return cls(status=CommandStatus.FAILED, error_message=str(error), error=error)
        return cls(status=CommandStatus.FAILED, error_message=error)

    @classmethod
    def cancelled(cls, reason: str | None = None) -> "CommandResult":
        """Create a cancelled command result."""
        return cls(status=CommandStatus.CANCELLED, error_message=reason or "Command was cancelled")
