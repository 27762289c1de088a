"""Command results for the starterkit CLI, shown as log lines or as JSON."""

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any

from starterkit.config import LOGGER


class MessageType(Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    SUCCESS = "success"


@dataclass
class CommandResult:
    """
    Outcome of one CLI command. The payload holds the machine-readable
    details that --json prints alongside the message.
    """

    success: bool
    message: str | None = None
    message_type: MessageType = MessageType.INFO
    payload: dict[str, Any] | None = None

    @property
    def exit_code(self) -> int:
        return 0 if self.success else 1

    def log(self) -> None:
        if not self.message:
            return

        if self.message_type == MessageType.ERROR:
            LOGGER.error(self.message)
        elif self.message_type == MessageType.WARNING:
            LOGGER.warning(self.message)
        elif self.message_type == MessageType.SUCCESS:
            LOGGER.info(f"✓ {self.message}")
        else:
            LOGGER.info(self.message)

    def to_json(self) -> str:
        body: dict[str, Any] = {
            "success": self.success,
            "status": self.message_type.value,
            "message": self.message,
        }
        if self.payload:
            body.update(self.payload)
        return json.dumps(body, indent=2, default=str)

    def emit(self, as_json: bool = False) -> None:
        """Print the result as JSON on stdout, or log it."""
        if as_json:
            print(self.to_json())
        else:
            self.log()


def success(
    message: str | None = None, payload: dict[str, Any] | None = None
) -> CommandResult:
    return CommandResult(
        success=True,
        message=message,
        message_type=MessageType.SUCCESS if message else MessageType.INFO,
        payload=payload,
    )


def error(message: str, payload: dict[str, Any] | None = None) -> CommandResult:
    return CommandResult(
        success=False, message=message, message_type=MessageType.ERROR, payload=payload
    )


def warning(message: str, payload: dict[str, Any] | None = None) -> CommandResult:
    """A successful result that still needs the operator's attention."""
    return CommandResult(
        success=True, message=message, message_type=MessageType.WARNING, payload=payload
    )
