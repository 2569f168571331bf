"""Writing one log file per worker thread, each holding a factorial."""

from __future__ import annotations

import os
import random
import sys
import threading
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union

DIRECTORY_NAME = "logFolder"
FILE_MODE = 0o755
_WORD = 1 << 64

PathLike = Union[str, "os.PathLike[str]"]


def factorial(num: int) -> int:
    """Return ``num``! reduced to an unsigned 64-bit value."""
    result = 1
    for i in range(1, num + 1):
        result = result * i % _WORD
    return result


def write_thread_log(directory: PathLike, num: int) -> Path:
    """Write ``thread<num>.txt`` in ``directory`` and return its path."""
    path = Path(directory) / f"thread{num}.txt"
    path.write_text(
        f"This thread's value is {num}.\n"
        f"The factorial of {num} is {factorial(num)}.\n"
    )
    os.chmod(path, FILE_MODE)
    return path


def ensure_directory(path: PathLike) -> Path:
    """Create ``path`` if missing; raise ``NotADirectoryError`` if it is a file."""
    directory = Path(path)
    if not directory.exists():
        directory.mkdir(mode=FILE_MODE)
    elif not directory.is_dir():
        raise NotADirectoryError(f"Path exists but is not a directory: {directory}")
    return directory


def run_threads(directory: PathLike, count: int) -> List[Path]:
    """Start ``count`` threads numbered from 1, each writing its log; wait for all.

    Returns the files written, in thread order. Files that cannot be written
    are reported on stderr.
    """
    directory = Path(directory)
    written: Dict[int, Path] = {}
    lock = threading.Lock()

    def worker(num: int) -> None:
        try:
            path = write_thread_log(directory, num)
        except OSError:
            print(f"Error creating file: {directory / f'thread{num}.txt'}", file=sys.stderr)
            return
        with lock:
            written[num] = path

    threads = [threading.Thread(target=worker, args=(num,)) for num in range(1, count + 1)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return [written[num] for num in sorted(written)]


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    count = random.randint(1, 10)
    status = 0
    if args:
        print("You silly rabbit, this program accepts no arguments; running with 3 threads.")
        count = 3
        status = 1

    try:
        ensure_directory(DIRECTORY_NAME)
    except NotADirectoryError as exc:
        print(exc, file=sys.stderr)
        return 1
    except OSError:
        print(f"Error creating directory: {DIRECTORY_NAME}", file=sys.stderr)
        return 1

    run_threads(DIRECTORY_NAME, count)
    return status


if __name__ == "__main__":
    sys.exit(main())