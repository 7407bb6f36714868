"""Minimal snapshot testing for bytes and binary data.

    from expect_bytes import expect_file

    def test_example():
        expect_file("test_data/example").assert_eq(b"example\\n")
"""

from .compare.binary import first_diff_index
from .snapshot.expect_file import ExpectFile, Position, expect_file
from .snapshot.hints import HelpLatch

__all__ = [
    "ExpectFile",
    "HelpLatch",
    "Position",
    "expect_file",
    "first_diff_index",
]
