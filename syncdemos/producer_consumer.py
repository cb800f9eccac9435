"""Bounded producer/consumer counter guarded by a condition variable or by semaphores."""

from __future__ import annotations

import argparse
import threading
from collections.abc import Callable, Sequence

ITERATIONS = 1000
CAPACITY = 30

Emit = Callable[[str], None]


def _thread_label() -> int:
    return threading.get_ident() & 0xFFFFFFFF


def _validate(iterations: int, capacity: int) -> None:
    if iterations < 0:
        raise ValueError(f"iterations must be non-negative, got {iterations}")
    if capacity < 1:
        raise ValueError(f"capacity must be at least 1, got {capacity}")


def _run_pair(producer: Callable[[], None], consumer: Callable[[], None]) -> None:
    threads = [threading.Thread(target=producer), threading.Thread(target=consumer)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()


def run_with_condition(
    iterations: int = ITERATIONS, capacity: int = CAPACITY, emit: Emit = print
) -> int:
    """Run one producer and one consumer synchronised by condition variables.

    Each step reports ``"<thread>: <count>"`` through *emit*. Returns the final count.
    """
    _validate(iterations, capacity)
    lock = threading.Lock()
    not_full = threading.Condition(lock)
    not_empty = threading.Condition(lock)
    count = 0

    def producer() -> None:
        nonlocal count
        for _ in range(iterations):
            with lock:
                while count == capacity:
                    not_full.wait()
                if count < capacity:
                    count += 1
                emit(f"{_thread_label()}: {count}")
                not_empty.notify()

    def consumer() -> None:
        nonlocal count
        for _ in range(iterations):
            with lock:
                while count == 0:
                    not_empty.wait()
                if count > 0:
                    count -= 1
                emit(f"{_thread_label()}: {count}")
                not_full.notify()

    _run_pair(producer, consumer)
    return count


def run_with_semaphores(
    iterations: int = ITERATIONS, capacity: int = CAPACITY, emit: Emit = print
) -> int:
    """Run one producer and one consumer synchronised by counting semaphores.

    Each step reports ``"<thread>: <count>"`` through *emit*. Returns the final count.
    """
    _validate(iterations, capacity)
    mutex = threading.Semaphore(1)
    empty = threading.Semaphore(capacity)
    filled = threading.Semaphore(0)
    count = 0

    def producer() -> None:
        nonlocal count
        for _ in range(iterations):
            empty.acquire()
            with mutex:
                count += 1
                emit(f"{_thread_label()}: {count}")
            filled.release()

    def consumer() -> None:
        nonlocal count
        for _ in range(iterations):
            filled.acquire()
            with mutex:
                count -= 1
                emit(f"{_thread_label()}: {count}")
            empty.release()

    _run_pair(producer, consumer)
    return count


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Producer/consumer demonstration.")
    parser.add_argument(
        "--method", choices=("condition", "semaphore"), default="condition"
    )
    parser.add_argument("--iterations", type=int, default=ITERATIONS)
    parser.add_argument("--capacity", type=int, default=CAPACITY)
    args = parser.parse_args(argv)

    runner = run_with_condition if args.method == "condition" else run_with_semaphores
    try:
        counter = runner(args.iterations, args.capacity, print)
    except ValueError as exc:
        parser.error(str(exc))
    if counter != 0:
        print(f"BOOM! counter={counter}")
    else:
        print(f"OK counter={counter}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())