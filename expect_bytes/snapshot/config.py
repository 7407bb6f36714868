"""Environment switches read at assertion time."""

import os

UPDATE_EXPECT_VAR_NAME = "UPDATE_EXPECT"
SHARED_PROCESS_VAR_NAME = "EXPECT_BYTES_SHARED_PROCESS"


def update_requested(var_name=UPDATE_EXPECT_VAR_NAME):
    # Any value counts, including an empty one.
    return var_name in os.environ


def shares_process():
    return SHARED_PROCESS_VAR_NAME in os.environ
