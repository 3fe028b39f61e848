"""
Transferable — the thread-transfer capability marker.

A type is Transferable when an instance may be handed to another thread
(put on a queue, stored in a cross-thread structure) without breaking its
own guarantees. Nothing is inferred from the structure of a type: a class
either subclasses Transferable or is registered explicitly, so every
claim can be found with a search for "Transferable".
"""

from abc import ABC


class Transferable(ABC):
    """Marker base class. Declares no methods; opt in by subclassing or Transferable.register()."""


def is_transferable(obj) -> bool:
    """True if obj's type has opted into the Transferable capability."""
    return isinstance(obj, Transferable)


def require_transferable(obj):
    """
    Return obj unchanged if it is Transferable.

    For APIs that move values between threads and want to reject anything
    that has not opted in.

    Raises:
        TypeError: If obj's type is not Transferable.
    """
    if not is_transferable(obj):
        raise TypeError(
            f"{type(obj).__name__} is not Transferable; "
            "wrap it in SendWrapper or register the type explicitly"
        )
    return obj
