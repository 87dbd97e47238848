from __future__ import annotations


class ContainerError(Exception):
    """Base class for inputs a container refuses to store."""

    def __init__(self, message: str, value: object = None) -> None:
        super().__init__(message)
        self.value = value


class InvalidViewInput(ContainerError, ValueError):
    """The parser produced nothing usable, or the custom index cannot be used as a key."""


class NotAView(ContainerError, TypeError):
    """The value does not expose a usable `cid`."""


__all__ = ["ContainerError", "InvalidViewInput", "NotAView"]
