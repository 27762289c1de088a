"""Exception classes for starterkit."""


class Error(Exception):
    """Base class for exceptions in this module."""

    pass


class PackCreditError(Error):
    """
    Exception raised when starter packs could not be credited.
    Raised after the card/deck transaction has already committed.
    """

    def __init__(self, user_id: str, quantity: int) -> None:
        self.user_id = user_id
        self.quantity = quantity

    def __str__(self) -> str:
        return (
            f"Failed to credit {self.quantity} starter packs to user "
            f"{self.user_id}: no matching user was updated"
        )


class UserNotFoundError(Error):
    def __init__(self, user_id: str) -> None:
        self.user_id = user_id

    def __str__(self) -> str:
        return f"User '{self.user_id}' not found"


class StarterConfigError(Error):
    """
    Exception raised for malformed starter content configuration.
    """

    def __init__(self, problems: list[str]) -> None:
        self.problems = problems

    def __str__(self) -> str:
        message = "Invalid starter configuration.\n\n"
        message += "\n".join(f"- {problem}" for problem in self.problems)
        return message
