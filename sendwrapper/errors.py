"""
Contract violations raised by SendWrapper.

These signal programmer misuse, not transient conditions. Nothing in this
package catches them, and callers should let them end the current unit of
work instead of retrying.
"""

from typing import Optional


ACCESS_ERROR = "accessed wrapped value from a thread different from the one it was created on."
DESTRUCTION_ERROR = "dropped wrapped value from a thread different from the one it was created on."
CLOSED_ERROR = "wrapped value is no longer owned by this SendWrapper."


class SendWrapperError(RuntimeError):
    """Base class for every SendWrapper contract violation."""


class _CrossThreadError(SendWrapperError):
    default_message = ""

    def __init__(self, owner, current, message: Optional[str] = None):
        super().__init__(message or self.default_message)
        self.owner = owner
        self.current = current


class CrossThreadAccess(_CrossThreadError):
    """Read or write access from a thread other than the owner."""
    default_message = ACCESS_ERROR


class CrossThreadDestruction(_CrossThreadError):
    """Destruction from a thread other than the owner. The payload has been leaked."""
    default_message = DESTRUCTION_ERROR


class WrapperClosedError(SendWrapperError, ValueError):
    """Access on the owner thread after the payload was destroyed, leaked or taken."""

    def __init__(self, state, message: Optional[str] = None):
        super().__init__(message or f"{CLOSED_ERROR} (state: {state.value})")
        self.state = state
