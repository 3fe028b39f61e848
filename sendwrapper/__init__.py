"""
sendwrapper — Thread-Confined Values
Move values that are not thread-safe between threads without ever
touching them off the thread that created them.

SendWrapper provides:
1. Transferable — an explicit marker for "safe to hand to another thread"
2. Guarded access — deref()/value work only on the creating thread
3. Guarded destruction — off-thread drops leak the payload and raise,
   instead of finalizing it in the wrong place

Usage:
    from sendwrapper import SendWrapper
    wrapper = SendWrapper(connection)
    work_queue.put(wrapper)          # any thread may carry it
    wrapper.deref().execute(...)     # only the creating thread may use it
"""

import logging

from sendwrapper.wrapper import SendWrapper, WrapperState
from sendwrapper.thread_id import ThreadId, current as current_thread_id
from sendwrapper.transferable import Transferable, is_transferable, require_transferable
from sendwrapper.leak import leaked_count
from sendwrapper.errors import (
    SendWrapperError,
    CrossThreadAccess,
    CrossThreadDestruction,
    WrapperClosedError,
    ACCESS_ERROR,
    DESTRUCTION_ERROR,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
__all__ = [
    "SendWrapper",
    "WrapperState",
    "ThreadId",
    "current_thread_id",
    "Transferable",
    "is_transferable",
    "require_transferable",
    "leaked_count",
    "SendWrapperError",
    "CrossThreadAccess",
    "CrossThreadDestruction",
    "WrapperClosedError",
    "ACCESS_ERROR",
    "DESTRUCTION_ERROR",
]
