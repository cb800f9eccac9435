"""Producer/consumer, readers/writers and dining philosophers solved with threads, semaphores and condition variables."""

__version__ = "0.1.0"