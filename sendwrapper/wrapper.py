"""
SendWrapper — Thread-Confined Values
Move a value between threads while only ever touching it on the thread
that created it.

A SendWrapper may be put on a queue, returned from a future or stored
anywhere that demands a Transferable object. Reading, writing and
destroying the payload are all gated on the creating thread:

    wrapper = SendWrapper(connection)    # created on thread A
    queue.put(wrapper)                   # fine from anywhere
    wrapper.deref()                      # thread A: the connection
                                         # thread B: CrossThreadAccess

Destroying the wrapper from the wrong thread never finalizes the payload.
The payload is leaked and CrossThreadDestruction is raised, unless the
thread is already propagating another error.
"""

import logging
import sys
from enum import Enum
from typing import Generic, TypeVar

from sendwrapper import thread_id
from sendwrapper.errors import CrossThreadAccess, CrossThreadDestruction, WrapperClosedError
from sendwrapper.leak import leak
from sendwrapper.transferable import Transferable

logger = logging.getLogger(__name__)

T = TypeVar("T")


class WrapperState(Enum):
    LIVE = "live"
    DESTROYED = "destroyed"   # payload released on the owner thread
    LEAKED = "leaked"         # dropped off-thread, payload parked in the leak registry
    RELEASED = "released"     # payload handed back by take()


class SendWrapper(Transferable, Generic[T]):
    """
    Owns one payload and pins it to the creating thread.

    The wrapper object itself is Transferable regardless of the payload's
    type. Only the owner thread may read, write, take or destroy the
    payload; every other thread can do nothing but pass the wrapper on.

    Args:
        value: The payload. It is not copied.
    """

    def __init__(self, value: T):
        self._data = value
        self._thread_id = thread_id.current()
        self._state = WrapperState.LIVE
        # Last thread refused by _check_access; its failing frames may drop us later.
        self._access_failed_on = None
        logger.debug("SendWrapper created on %s for %s", self._thread_id, type(value).__name__)

    @property
    def owner(self) -> thread_id.ThreadId:
        """The creating thread. Safe to read from any thread."""
        return self._thread_id

    @property
    def state(self) -> WrapperState:
        return self._state

    def valid(self) -> bool:
        """True iff called from the thread that created this wrapper."""
        return thread_id.current() == self._thread_id

    def _check_access(self) -> None:
        # Thread check first: a non-owner always sees CrossThreadAccess.
        current = thread_id.current()
        if current != self._thread_id:
            self._access_failed_on = current
            raise CrossThreadAccess(self._thread_id, current)
        if self._state is not WrapperState.LIVE:
            raise WrapperClosedError(self._state)

    def deref(self) -> T:
        """
        Return the payload for reading.

        Raises:
            CrossThreadAccess: If called off the owner thread.
            WrapperClosedError: If the payload is no longer owned.
        """
        self._check_access()
        return self._data

    def deref_mut(self) -> T:
        """
        Return the payload for in-place mutation.

        Same checks as deref(). Python has no separate exclusive reference,
        so this returns the same object; it exists so write sites say so.
        """
        self._check_access()
        return self._data

    @property
    def value(self) -> T:
        """The payload. Reading and assigning are both owner-only."""
        return self.deref()

    @value.setter
    def value(self, new_value: T):
        self._check_access()
        # The old payload is released here, on the owner thread.
        self._data = new_value

    def take(self) -> T:
        """
        Hand the payload back to the caller and give up ownership.

        The wrapper ends in the RELEASED state and its destruction becomes
        a no-op.
        """
        self._check_access()
        payload = self._data
        self._data = None
        self._state = WrapperState.RELEASED
        logger.debug("SendWrapper payload taken on %s", self._thread_id)
        return payload

    def _destroy(self, unwinding: bool) -> None:
        if self._state is not WrapperState.LIVE:
            return

        current = thread_id.current()
        if current == self._thread_id:
            self._data = None
            self._state = WrapperState.DESTROYED
            logger.debug("SendWrapper destroyed on owner %s", current)
            return

        # Wrong thread: the payload's own cleanup must not run here.
        leak(self._data)
        self._data = None
        self._state = WrapperState.LEAKED

        if unwinding:
            logger.error(
                "SendWrapper owned by %s dropped on %s while unwinding; payload leaked",
                self._thread_id,
                current,
            )
            return

        logger.error(
            "SendWrapper owned by %s dropped on %s; payload leaked",
            self._thread_id,
            current,
        )
        raise CrossThreadDestruction(self._thread_id, current)

    def close(self) -> None:
        """
        Destroy the payload now.

        On the owner thread the wrapper drops its reference to the payload.
        On any other thread the payload is leaked and CrossThreadDestruction
        is raised, unless an exception is already being handled on this
        thread. Calling close() again is a no-op.
        """
        self._destroy(unwinding=sys.exc_info()[1] is not None)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self._destroy(unwinding=exc_type is not None)
        return False

    def __del__(self):
        # Partially constructed, or already destroyed explicitly.
        if getattr(self, "_state", None) is not WrapperState.LIVE:
            return
        # Module globals may already be gone; leave the payload to the interpreter.
        if sys.is_finalizing():
            return
        # A frame that failed on CrossThreadAccess is freed only after its
        # exception was handled, when sys.exc_info() is already clear. Dropping
        # the wrapper on that thread is part of the same failure.
        unwinding = (
            sys.exc_info()[1] is not None
            or thread_id.current() == getattr(self, "_access_failed_on", None)
        )
        # An error raised here reaches sys.unraisablehook, which is the report.
        self._destroy(unwinding=unwinding)

    def __getattr__(self, name):
        """
        Forward public attribute lookups to the payload.

        The lookup goes through deref(), so on a foreign thread or after the
        wrapper is closed it raises CrossThreadAccess or WrapperClosedError
        rather than AttributeError. hasattr() does not swallow those: asking a
        wrapper about its payload off the owner thread is itself an access.
        """
        if name.startswith("_"):
            raise AttributeError(name)
        return getattr(self.deref(), name)

    def __copy__(self):
        raise TypeError("SendWrapper cannot be copied; it is the sole owner of its payload")

    def __deepcopy__(self, memo):
        raise TypeError("SendWrapper cannot be copied; it is the sole owner of its payload")

    def __reduce_ex__(self, protocol):
        raise TypeError("SendWrapper cannot be pickled; that would read the payload off its owner thread")

    def __repr__(self) -> str:
        return f"<SendWrapper owner={self._thread_id!r} state={self._state.value}>"
