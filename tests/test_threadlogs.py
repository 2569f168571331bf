import math
import os
import random
import stat
from unittest import mock

import pytest

from syslab.threadlogs import (
    DIRECTORY_NAME,
    ensure_directory,
    factorial,
    main,
    run_threads,
    write_thread_log,
)


def test_factorial_small_values():
    assert factorial(0) == 1
    assert factorial(1) == 1
    assert factorial(20) == math.factorial(20)


def test_factorial_wraps_at_64_bits():
    assert factorial(21) == math.factorial(21) % 2**64
    assert 0 <= factorial(30) < 2**64


def test_write_thread_log_contents_and_mode(tmp_path):
    path = write_thread_log(tmp_path, 3)
    assert path == tmp_path / "thread3.txt"
    assert path.read_text().splitlines() == [
        "This thread's value is 3.",
        f"The factorial of 3 is {factorial(3)}.",
    ]
    if os.name == "posix":
        assert stat.S_IMODE(path.stat().st_mode) == 0o755


def test_ensure_directory_creates_and_reuses(tmp_path):
    target = tmp_path / "logs"
    assert ensure_directory(target) == target
    assert target.is_dir()
    assert ensure_directory(target) == target


def test_ensure_directory_rejects_file(tmp_path):
    target = tmp_path / "logs"
    target.write_text("x")
    with pytest.raises(NotADirectoryError):
        ensure_directory(target)


def test_run_threads_writes_one_file_per_thread(tmp_path):
    paths = run_threads(tmp_path, 4)
    assert [p.name for p in paths] == [f"thread{n}.txt" for n in range(1, 5)]
    assert sorted(p.name for p in tmp_path.iterdir()) == sorted(p.name for p in paths)


def test_run_threads_reports_unwritable_directory(tmp_path, capsys):
    missing = tmp_path / "missing"
    assert run_threads(missing, 2) == []
    assert "Error creating file" in capsys.readouterr().err


def test_main_with_arguments_uses_three_threads(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["extra"]) == 1
    assert "accepts no arguments" in capsys.readouterr().out
    names = sorted(p.name for p in (tmp_path / DIRECTORY_NAME).iterdir())
    assert names == ["thread1.txt", "thread2.txt", "thread3.txt"]


def test_main_uses_random_thread_count(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with mock.patch.object(random, "randint", return_value=5):
        assert main([]) == 0
    assert len(list((tmp_path / DIRECTORY_NAME).iterdir())) == 5


def test_main_fails_when_path_is_a_file(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / DIRECTORY_NAME).write_text("not a directory")
    assert main([]) == 1
    assert "Path exists but is not a directory" in capsys.readouterr().err