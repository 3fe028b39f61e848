"""
Leak Registry
Holds payloads that were dropped from the wrong thread.

Forgetting the reference is not enough to leak a value in Python: the
garbage collector would finalize it on whatever thread released it last.
Payloads parked here stay referenced for the rest of the process, so
their finalizers never run off their owner thread.
"""

import threading


_leaked = []
_lock = threading.Lock()


def leak(payload) -> None:
    """Keep payload alive for the life of the process."""
    with _lock:
        _leaked.append(payload)


def leaked_count() -> int:
    """Number of payloads leaked so far."""
    with _lock:
        return len(_leaked)
