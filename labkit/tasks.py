"""Several threads each writing a numbered run of lines."""

from __future__ import annotations

import argparse
import sys
import threading
from typing import Iterator, Optional, TextIO

DEFAULT_TASKS = 5
DEFAULT_ITERATIONS = 2000 * 3


def task_lines(task_id: int, iterations: int) -> Iterator[str]:
    """Yield the lines task ``task_id`` writes, numbered from 1."""
    for step in range(1, iterations + 1):
        yield f"Task {task_id} => [{step}]"


def run_tasks(
    task_count: int = DEFAULT_TASKS,
    iterations: int = DEFAULT_ITERATIONS,
    out: Optional[TextIO] = None,
) -> int:
    """Run tasks 1 .. ``task_count`` in parallel threads writing to ``out``.

    Each line is written whole; lines of different tasks may interleave.
    Returns the number of lines written.
    """
    if task_count < 0 or iterations < 0:
        raise ValueError("task_count and iterations must not be negative")
    stream = out if out is not None else sys.stdout
    lock = threading.Lock()

    def work(task_id: int) -> None:
        for line in task_lines(task_id, iterations):
            with lock:
                stream.write(line + "\n")

    threads = [threading.Thread(target=work, args=(task_id,))
               for task_id in range(1, task_count + 1)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return task_count * iterations


def main(argv=None) -> int:
    """Run the tasks and write their lines to standard output."""
    parser = argparse.ArgumentParser(description="Run numbered tasks in threads.")
    parser.add_argument("--tasks", type=int, default=DEFAULT_TASKS)
    parser.add_argument("--iterations", type=int, default=DEFAULT_ITERATIONS)
    args = parser.parse_args(argv)
    try:
        run_tasks(args.tasks, args.iterations, sys.stdout)
    except ValueError as error:
        parser.error(str(error))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())