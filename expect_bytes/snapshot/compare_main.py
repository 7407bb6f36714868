#!/usr/bin/env python3
"""Compares an output file against a golden snapshot, updating it on request."""

import argparse
import sys

from runfiles import runfiles

from . import config, store
from .expect_file import ExpectFile


def main(argv=None):
    parser = argparse.ArgumentParser(description="Compare binary output against a golden snapshot.")
    parser.add_argument("output", help="Path to the produced output file.")
    parser.add_argument("snapshot", help="Path to the golden snapshot file.")
    parser.add_argument(
        "--runfiles",
        action="store_true",
        help="Treat SNAPSHOT as a runfiles key instead of a filesystem path.",
    )
    parser.add_argument(
        "--update-var",
        default=config.UPDATE_EXPECT_VAR_NAME,
        help="Environment variable that switches on update mode.",
    )
    args = parser.parse_args(argv)

    actual = store.load(args.output)
    if actual is None:
        sys.exit("[expect-bytes] expected file {} was not produced".format(args.output))

    snapshot_path = args.snapshot
    if args.runfiles:
        snapshot_path = rlocation(runfiles.Create(), args.snapshot)

    print("[expect-bytes] compare {} against {}".format(args.output, snapshot_path))
    expect = ExpectFile(snapshot_path, update_var=args.update_var)
    if expect.try_assert_eq(actual, sys.stdout):
        return 0
    print("[expect-bytes] snapshot mismatch for {}".format(args.output), file=sys.stderr)
    return 1


def rlocation(r, path):
    location = r.Rlocation(path)
    assert location, "missing runfile {}".format(path)
    return location


if __name__ == "__main__":
    sys.exit(main())
