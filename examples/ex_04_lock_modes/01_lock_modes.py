"""Lock modes and concurrent first access.

1. Default ``LockMode.THREAD`` runs a builder at most once, even when two
   threads request the key at the same time.
2. ``LockMode.NONE`` drops locking; racing threads may both run the builder.
"""

from __future__ import annotations

import threading
import time

from lazywire import Container, LockMode


class Service:
    pass


def _two_thread_stats(container: Container) -> tuple[int, bool]:
    calls = 0
    calls_lock = threading.Lock()
    builder_started = threading.Event()
    builder_release = threading.Event()
    results: list[object | None] = [None, None]

    def build_service(c: Container) -> Service:
        nonlocal calls
        with calls_lock:
            calls += 1
            builder_started.set()
        builder_release.wait(timeout=2.0)
        return Service()

    container.set("service", build_service)

    def worker(index: int) -> None:
        results[index] = container.get("service")

    thread_0 = threading.Thread(target=worker, args=(0,))
    thread_0.start()

    if not builder_started.wait(timeout=2.0):
        msg = "Builder was not called within timeout."
        raise RuntimeError(msg)

    thread_1 = threading.Thread(target=worker, args=(1,))
    thread_1.start()

    deadline = time.monotonic() + 0.5
    while True:
        with calls_lock:
            current_calls = calls
        if current_calls >= 2 or time.monotonic() >= deadline:
            break
        time.sleep(0.001)

    builder_release.set()

    for thread in (thread_0, thread_1):
        thread.join(timeout=2.0)
        if thread.is_alive():
            msg = "Worker thread did not finish within timeout."
            raise RuntimeError(msg)

    with calls_lock:
        total_calls = calls
    return total_calls, results[0] is results[1]


def main() -> None:
    thread_calls, thread_shared = _two_thread_stats(Container())
    print(f"thread=calls={thread_calls} shared={thread_shared}")  # => thread=calls=1 shared=True

    none_calls, none_shared = _two_thread_stats(Container(lock_mode=LockMode.NONE))
    print(f"none=calls={none_calls} shared={none_shared}")  # => none=calls=2 shared=False


if __name__ == "__main__":
    main()
