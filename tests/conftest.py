from pathlib import Path

import pytest

from expect_bytes import ExpectFile, HelpLatch

TEST_DATA = Path(__file__).parent / "test_data"

# Kept apart from UPDATE_EXPECT so updating user snapshots never rewrites these fixtures.
FIXTURE_UPDATE_VAR = "UPDATE_EXPECT_BYTES"


@pytest.fixture
def always_help() -> HelpLatch:
    """Latch that prints the hint on every failure, as when tests share a process."""
    return HelpLatch(always=True)


@pytest.fixture
def golden(tmp_path) -> ExpectFile:
    """ExpectFile whose recorded content is b"example\\n"."""
    path = tmp_path / "example"
    path.write_bytes(b"example\n")
    return ExpectFile(path, update_var=FIXTURE_UPDATE_VAR)


@pytest.fixture
def in_tests_dir(monkeypatch) -> Path:
    """Runs the test from the tests directory so report locations stay relative."""
    tests_dir = Path(__file__).parent
    monkeypatch.chdir(tests_dir)
    return tests_dir
