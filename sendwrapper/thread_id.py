"""
Thread Identity
Opaque, comparable identifiers for threads that are never reused.

threading.get_ident() hands the same number to a new thread once the old
one has exited. An owner check built on it could let a stranger thread
pass as the creator, so each thread instead draws a fresh ThreadId from a
process-wide counter the first time it asks for one.
"""

import itertools
import threading
from dataclasses import dataclass


_counter = itertools.count(1)
_counter_lock = threading.Lock()
_local = threading.local()


@dataclass(frozen=True)
class ThreadId:
    """Identity of one thread for the lifetime of the process."""
    value: int

    def __repr__(self) -> str:
        return f"ThreadId({self.value})"


def current() -> ThreadId:
    """
    Return the ThreadId of the calling thread.

    The id is allocated on first call and cached in thread-local storage,
    so repeated calls from the same thread always compare equal.
    """
    try:
        return _local.thread_id
    except AttributeError:
        with _counter_lock:
            thread_id = ThreadId(next(_counter))
        _local.thread_id = thread_id
        return thread_id
