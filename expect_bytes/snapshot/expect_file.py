"""Self-updating golden files for binary data."""

import inspect
import io
import os
import sys

import pytest

from ..compare.binary import first_diff_index, marker_offset, render_window
from . import config, store
from .hints import help_text, should_print_help

_FAILURE = """
\x1b[1m\x1b[91merror\x1b[97m: expect test failed\x1b[0m
   \x1b[1m\x1b[34m-->\x1b[0m {location}
{help}
\x1b[1mExpect\x1b[0m:
{expect}

\x1b[1mActual\x1b[0m:
<binary>

"""

_DIFF = """\x1b[1mDiff\x1b[0m:
Binary files differ at byte {diff_idx:#x}

Expect: {expect}
Actual: {actual}
        {offset}\x1b[1m^^\x1b[0m
"""

_NOT_FOUND = "\x1b[1mNot found\x1b[0m"
_UPDATING = "\x1b[1m\x1b[92mupdating\x1b[0m: {}\n"


class Position:
    """Call site of an `expect_file` call."""

    def __init__(self, file, line, column=0):
        self.file = file
        self.line = line
        self.column = column

    def __str__(self):
        return "{}:{}:{}".format(self.file, self.line, self.column)

    def __repr__(self):
        return "Position({!r}, {!r}, {!r})".format(self.file, self.line, self.column)


class ExpectFile:
    """A golden file compared byte-for-byte against actual data.

    `assert_eq` updates or creates the file when the update variable
    (`UPDATE_EXPECT` by default) is set to any value.
    """

    def __init__(self, path, position=None, update_var=config.UPDATE_EXPECT_VAR_NAME):
        self.path = os.fspath(path)
        self.position = position
        self.update_var = update_var

    def __repr__(self):
        return "ExpectFile({!r})".format(self.path)

    def assert_eq(self, actual):
        """Fails the current test when the file's contents differ from `actual`.

        The report goes to stdout. I/O errors while reading or updating the file
        propagate as they are.
        """
        if not self.try_assert_eq(actual, sys.stdout):
            # The report is already printed; a traceback would only add noise.
            pytest.fail("expect test failed: {}".format(self.path), pytrace=False)

    def try_assert_eq(self, actual, writer=None, update=None, help_latch=None):
        """Runs the comparison and returns whether it passed, writing all output to `writer`.

        `writer` may be a text or a binary stream. `actual` must be bytes-like;
        anything else raises TypeError before the file is touched.
        """
        if writer is None:
            writer = sys.stdout
        actual = memoryview(actual).tobytes()
        expected = store.load(self.path)
        if expected == actual:
            return True

        if update is None:
            update = config.update_requested(self.update_var)
        if update:
            _write(writer, _UPDATING.format(self.path))
            store.save(self.path, actual)
            return True

        if help_latch is None:
            print_help = should_print_help()
        else:
            print_help = help_latch.should_print()

        _write(
            writer,
            _FAILURE.format(
                location=self.path,
                help=help_text(self.update_var) if print_help else "",
                expect=_NOT_FOUND if expected is None else "<binary>",
            )
        )
        if expected is not None:
            diff_idx = first_diff_index(expected, actual)
            if diff_idx is None:
                diff_idx = 0
            _write(
                writer,
                _DIFF.format(
                    diff_idx=diff_idx,
                    expect=render_window(expected, diff_idx, True),
                    actual=render_window(actual, diff_idx, False),
                    offset=marker_offset(diff_idx),
                )
            )
        return False


def _write(writer, text):
    # Binary sinks get the same report encoded as UTF-8.
    if isinstance(writer, io.TextIOBase):
        writer.write(text)
    else:
        writer.write(text.encode("utf-8"))


def expect_file(path, update_var=config.UPDATE_EXPECT_VAR_NAME):
    """Creates an ExpectFile; a relative `path` is taken from the calling file's directory."""
    frame = inspect.currentframe().f_back
    try:
        info = inspect.getframeinfo(frame, context=0)
    finally:
        del frame
    positions = getattr(info, "positions", None)
    column = 0
    if positions is not None and positions.col_offset is not None:
        column = positions.col_offset + 1
    position = Position(info.filename, info.lineno, column)

    path = os.fspath(path)
    if not os.path.isabs(path):
        path = os.path.join(os.path.dirname(info.filename), path)
    return ExpectFile(path, position=position, update_var=update_var)
