"""Dining philosophers with three deadlock-free strategies."""

from __future__ import annotations

import argparse
import itertools
import threading
from collections.abc import Callable, Sequence
from enum import Enum

PHILOSOPHERS = 5

Emit = Callable[[str], None]


class Strategy(Enum):
    """Ways to keep the philosophers from deadlocking."""

    NO_HOLD_AND_WAIT = "no-hold-and-wait"
    RESOURCE_ORDERING = "resource-ordering"
    BANKERS = "bankers"


class Banker:
    """Banker's algorithm over the forks: each philosopher claims its two forks."""

    def __init__(self, count: int = PHILOSOPHERS) -> None:
        if count < 2:
            raise ValueError(f"need at least 2 philosophers, got {count}")
        self._count = count
        self._claim = [
            [1 if fork in (seat, (seat + 1) % count) else 0 for fork in range(count)]
            for seat in range(count)
        ]
        self._allocation = [[0] * count for _ in range(count)]
        self._available = [1] * count
        self._changed = threading.Condition()

    @property
    def claim(self) -> tuple[tuple[int, ...], ...]:
        return tuple(tuple(row) for row in self._claim)

    @property
    def allocation(self) -> tuple[tuple[int, ...], ...]:
        with self._changed:
            return tuple(tuple(row) for row in self._allocation)

    @property
    def available(self) -> tuple[int, ...]:
        with self._changed:
            return tuple(self._available)

    def _check(self, philosopher: int) -> None:
        if not 0 <= philosopher < self._count:
            raise ValueError(f"no philosopher {philosopher}")

    def request(self, philosopher: int) -> None:
        """Block until the philosopher's outstanding claim can be granted, then grant it."""
        self._check(philosopher)
        need = [
            claimed - held
            for claimed, held in zip(
                self._claim[philosopher], self._allocation[philosopher]
            )
        ]
        with self._changed:
            self._changed.wait_for(
                lambda: all(n <= free for n, free in zip(need, self._available))
            )
            self._available = [free - n for free, n in zip(self._available, need)]
            self._allocation[philosopher] = [
                held + n for held, n in zip(self._allocation[philosopher], need)
            ]

    def release(self, philosopher: int) -> None:
        """Return everything the philosopher holds and wake all waiters."""
        self._check(philosopher)
        with self._changed:
            self._available = [
                free + held
                for free, held in zip(self._available, self._allocation[philosopher])
            ]
            self._allocation[philosopher] = [0] * self._count
            self._changed.notify_all()


def dine(
    strategy: Strategy | str, meals: int | None = None, emit: Emit = print
) -> list[int]:
    """Seat the philosophers and let each eat *meals* times (forever if None).

    Returns the number of meals each philosopher ate.
    """
    strategy = Strategy(strategy)
    if meals is not None and meals < 0:
        raise ValueError(f"meals must be non-negative, got {meals}")

    forks = [threading.Semaphore(1) for _ in range(PHILOSOPHERS)]
    once = threading.Semaphore(1)
    banker = Banker(PHILOSOPHERS)
    eaten = [0] * PHILOSOPHERS

    def pick_up(seat: int, fork: int) -> None:
        forks[fork].acquire()
        emit(f"philosopher {seat} picks up the fork {fork}.")

    def put_down(seat: int, fork: int) -> None:
        forks[fork].release()
        emit(f"philosopher {seat} puts down the fork {fork}.")

    def philosopher(seat: int) -> None:
        left, right = seat, (seat + 1) % PHILOSOPHERS
        rounds = itertools.count() if meals is None else range(meals)
        for _ in rounds:
            if strategy is Strategy.BANKERS:
                banker.request(seat)

            if strategy is Strategy.NO_HOLD_AND_WAIT:
                with once:
                    pick_up(seat, left)
                    pick_up(seat, right)
            elif strategy is Strategy.RESOURCE_ORDERING and seat == PHILOSOPHERS - 1:
                pick_up(seat, right)
                pick_up(seat, left)
            else:
                pick_up(seat, left)
                pick_up(seat, right)

            emit(f"philosopher {seat} is eating")
            eaten[seat] += 1

            put_down(seat, left)
            put_down(seat, right)

            if strategy is Strategy.BANKERS:
                banker.release(seat)

            emit(f"philosopher {seat} is thinking")

    threads = [
        threading.Thread(target=philosopher, args=(seat,)) for seat in range(PHILOSOPHERS)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return eaten


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Dining philosophers demonstration.")
    parser.add_argument(
        "--strategy",
        choices=[strategy.value for strategy in Strategy],
        default=Strategy.BANKERS.value,
    )
    parser.add_argument(
        "--meals", type=int, default=None, help="meals per philosopher (default: forever)"
    )
    args = parser.parse_args(argv)
    try:
        dine(args.strategy, args.meals, print)
    except ValueError as exc:
        parser.error(str(exc))
    print("NO DEADLOCK")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())