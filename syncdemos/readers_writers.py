"""Readers/writers locks with reader or writer preference."""

from __future__ import annotations

import argparse
import threading
from collections.abc import Callable, Iterator, Sequence
from contextlib import contextmanager
from typing import Union

ITERATIONS = 10000

Emit = Callable[[str], None]


class ReaderPreferenceLock:
    """Shared/exclusive lock in which readers never wait behind queued writers."""

    def __init__(self) -> None:
        self._count_guard = threading.Semaphore(1)
        self._write = threading.Semaphore(1)
        self._readers = 0

    @property
    def readers(self) -> int:
        """Readers that have entered or are about to enter."""
        return self._readers

    @contextmanager
    def reading(self) -> Iterator[None]:
        with self._count_guard:
            self._readers += 1
            if self._readers == 1:
                self._write.acquire()
        try:
            yield
        finally:
            with self._count_guard:
                self._readers -= 1
                if self._readers == 0:
                    self._write.release()

    @contextmanager
    def writing(self) -> Iterator[None]:
        with self._write:
            yield


class WriterPreferenceLock:
    """Shared/exclusive lock in which a waiting writer holds back new readers."""

    def __init__(self) -> None:
        self._reader_queue = threading.Semaphore(1)
        self._reader_gate = threading.Semaphore(1)
        self._reader_guard = threading.Semaphore(1)
        self._writer_guard = threading.Semaphore(1)
        self._write = threading.Semaphore(1)
        self._readers = 0
        self._writers = 0

    @property
    def readers(self) -> int:
        """Readers currently inside or leaving."""
        return self._readers

    @property
    def writers(self) -> int:
        """Writers waiting or writing."""
        return self._writers

    @contextmanager
    def reading(self) -> Iterator[None]:
        with self._reader_queue, self._reader_gate, self._reader_guard:
            self._readers += 1
            if self._readers == 1:
                self._write.acquire()
        try:
            yield
        finally:
            with self._reader_guard:
                self._readers -= 1
                if self._readers == 0:
                    self._write.release()

    @contextmanager
    def writing(self) -> Iterator[None]:
        with self._writer_guard:
            self._writers += 1
            if self._writers == 1:
                self._reader_gate.acquire()
        try:
            with self._write:
                yield
        finally:
            with self._writer_guard:
                self._writers -= 1
                if self._writers == 0:
                    self._reader_gate.release()


ReadWriteLock = Union[ReaderPreferenceLock, WriterPreferenceLock]


def run(
    lock: ReadWriteLock, iterations: int = ITERATIONS, emit: Emit = print
) -> tuple[int, int]:
    """Run one reader and one writer thread, each entering *iterations* times.

    Returns the number of reads and writes performed.
    """
    if iterations < 0:
        raise ValueError(f"iterations must be non-negative, got {iterations}")
    tallies = {"reads": 0, "writes": 0}

    def reader() -> None:
        for _ in range(iterations):
            with lock.reading():
                emit("Reader!")
            tallies["reads"] += 1

    def writer() -> None:
        for _ in range(iterations):
            with lock.writing():
                emit("Writer!")
            tallies["writes"] += 1

    threads = [threading.Thread(target=reader), threading.Thread(target=writer)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return tallies["reads"], tallies["writes"]


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Readers/writers demonstration.")
    parser.add_argument("--preference", choices=("reader", "writer"), default="reader")
    parser.add_argument("--iterations", type=int, default=ITERATIONS)
    args = parser.parse_args(argv)

    lock: ReadWriteLock = (
        ReaderPreferenceLock() if args.preference == "reader" else WriterPreferenceLock()
    )
    try:
        run(lock, args.iterations, print)
    except ValueError as exc:
        parser.error(str(exc))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())