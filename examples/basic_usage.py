"""
SendWrapper — Basic Usage Example

Demonstrates carrying a value that must stay on one thread through a
worker thread and back. The worker can hold and forward the wrapper,
but any attempt to use it there is refused.
"""

import queue
import sqlite3
import sys
import threading
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from sendwrapper import SendWrapper, CrossThreadAccess


def main():
    print("=" * 50)
    print("  SendWrapper — Thread-Confined Values")
    print("=" * 50)

    # sqlite3 connections refuse to be used from other threads by default
    wrapper = SendWrapper(sqlite3.connect(":memory:"))
    wrapper.execute("CREATE TABLE notes (text TEXT)")
    wrapper.execute("INSERT INTO notes VALUES ('written on the main thread')")

    to_worker = queue.Queue()
    to_main = queue.Queue()

    def worker():
        carried = to_worker.get()
        print(f"\nWorker holds {carried!r}")
        print(f"  valid() on worker: {carried.valid()}")
        try:
            carried.execute("SELECT * FROM notes")
            print("  ERROR: Should have failed!")
        except CrossThreadAccess as e:
            print(f"  Correctly rejected: {e}")
        to_main.put(carried)

    to_worker.put(wrapper)
    del wrapper

    t = threading.Thread(target=worker)
    t.start()
    wrapper = to_main.get()
    t.join()

    print(f"\nBack on main: valid() = {wrapper.valid()}")
    for row in wrapper.execute("SELECT * FROM notes"):
        print(f"  {row[0]}")

    wrapper.deref().close()
    wrapper.close()
    print(f"\nWrapper state: {wrapper.state.value}")


if __name__ == "__main__":
    main()
