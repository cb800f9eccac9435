# syncdemos

Three classic synchronisation problems, each solved with Python threads and
the primitives in `threading`. Every run reports a trace of what the threads
did through an `emit` callable (`print` by default). You can follow the
trace to see how each solution keeps the threads in order.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Producer / consumer

One producer and one consumer share a bounded counter. The producer
increments it and the consumer decrements it, each the same number of times.
The counter never goes past its capacity or below zero. Each step is traced
as `"<thread>: <count>"`.

```
syncdemos-producer-consumer [--method {condition,semaphore}] [--iterations N] [--capacity N]
```

The defaults are `condition`, 1000 iterations and a capacity of 30. When both
threads have finished, the command prints `OK counter=0`. If the counter is
not back at zero it prints `BOOM! counter=<n>` instead. A negative iteration
count or a capacity below 1 is rejected.

In code:

- `run_with_condition(iterations, capacity, emit)` uses a lock and two
  condition variables.
- `run_with_semaphores(iterations, capacity, emit)` uses a mutex together
  with "empty" and "fill" counting semaphores.

Both return the final value of the counter. Both raise `ValueError` for bad
arguments.

## Readers / writers

A reader thread and a writer thread take turns at a shared resource. Two
locks are available:

- `ReaderPreferenceLock`: the writer waits while any reader is active, and
  new readers never wait behind a queued writer. Its `readers` property gives
  the current reader count.
- `WriterPreferenceLock`: a waiting writer blocks new readers from entering.
  It has `readers` and `writers` properties.

Both offer `reading()` and `writing()` context managers:

```python
from syncdemos.readers_writers import WriterPreferenceLock, run

lock = WriterPreferenceLock()
with lock.reading():
    ...
reads, writes = run(lock, 100, print)
```

`run(lock, iterations, emit)` starts one reader and one writer thread. Each
enters `iterations` times and emits `Reader!` or `Writer!` while it holds the
lock. It returns the number of reads and writes. A negative count raises
`ValueError`.

From the command line:

```
syncdemos-readers-writers [--preference {reader,writer}] [--iterations N]
```

The defaults are `reader` and 10000 iterations.

## Dining philosophers

Five philosophers share five forks. A `Strategy` picks one of three ways to
avoid deadlock:

- `Strategy.NO_HOLD_AND_WAIT` (`no-hold-and-wait`): a philosopher picks up
  both forks in one step, under a shared guard.
- `Strategy.RESOURCE_ORDERING` (`resource-ordering`): the last philosopher
  picks up the forks in the reverse order.
- `Strategy.BANKERS` (`bankers`): a `Banker` keeps a claim matrix, an
  allocation matrix and an available vector, exposed as the `claim`,
  `allocation` and `available` properties. `request(philosopher)` blocks
  until all of that philosopher's outstanding claim is free and then grants
  it. `release(philosopher)` returns everything the philosopher holds and
  wakes all waiters.

`dine(strategy, meals, emit)` seats the philosophers and lets each eat
`meals` times. It traces every pickup, meal, putdown and thought, and returns
the number of meals each philosopher ate. With `meals=None` the philosophers
never stop.

```
syncdemos-dining [--strategy {no-hold-and-wait,resource-ordering,bankers}] [--meals N]
```

The default strategy is `bankers`. Without `--meals` the table runs forever,
so stop it with Ctrl-C. Given a meal count, the command prints `NO DEADLOCK`
once every philosopher has finished.

Run any of the commands with `--help` to see its options.

## What it does not do

The number of philosophers and the pairing of one reader thread with one
writer thread are fixed. The runs do not time or measure the threads. They
only trace them.