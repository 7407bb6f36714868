"""Decides whether a failure report carries the update hint."""

import threading

from . import config

HELP = """
You can update all `expect_file` tests by running:

    env {var}=1 pytest

To update a single test, select it by node id with the same variable set:

    env {var}=1 pytest path/to/test_module.py::test_name
"""


def help_text(update_var=config.UPDATE_EXPECT_VAR_NAME):
    return HELP.format(var=update_var)


class HelpLatch:
    """Lets exactly one caller through, unless `always` is set."""

    def __init__(self, always=False):
        self.always = always
        self._lock = threading.Lock()
        self._printed = False

    def should_print(self):
        if self.always:
            return True
        with self._lock:
            if self._printed:
                return False
            self._printed = True
            return True


_PROCESS_LATCH = HelpLatch()


def should_print_help():
    # Tests sharing one process run in arbitrary order, so each failure needs the hint.
    if config.shares_process():
        return True
    return _PROCESS_LATCH.should_print()
