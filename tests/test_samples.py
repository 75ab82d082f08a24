"""Sample-file round-trip harness.

Takes every *.utf8 file in the samples directory and pushes it through all
six conversions, checking that each round trip gives back the bytes it
started from.

Usage:
    python tests/test_samples.py [--samples-dir DIR] [--rounds N]
    python -m pytest tests/test_samples.py -v
    UTFCONV_SAMPLES_DIR=/path/to/texts UTFCONV_ROUNDS=10000 python tests/test_samples.py
"""

from __future__ import annotations

import argparse
import glob
import os
import sys
import time
import unittest
from typing import Dict, List, Optional

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from utfconv import (
    UtfError,
    to_utf8_from16,
    to_utf8_from32,
    to_utf16_from8,
    to_utf16_from32,
    to_utf32_from8,
    to_utf32_from16,
)

# ── Locate sample data ────────────────────────────────────────

_SAMPLES_DIR: Optional[str] = os.environ.get("UTFCONV_SAMPLES_DIR", None)
_ROUNDS: int = int(os.environ.get("UTFCONV_ROUNDS", "1"))


def _find_samples_dir() -> str:
    if _SAMPLES_DIR:
        return _SAMPLES_DIR
    candidates = [
        os.path.join(os.path.dirname(__file__), "samples"),
        os.path.join(os.path.dirname(__file__), "..", "samples"),
    ]
    for d in candidates:
        if glob.glob(os.path.join(d, "*.utf8")):
            return d
    raise FileNotFoundError(
        "Cannot find sample files. Set UTFCONV_SAMPLES_DIR or --samples-dir."
    )


def _load_samples() -> Dict[str, bytes]:
    """Return {file stem: raw UTF-8 bytes} for every sample file."""
    d = _find_samples_dir()
    samples: Dict[str, bytes] = {}
    for path in sorted(glob.glob(os.path.join(d, "*.utf8"))):
        with open(path, "rb") as f:
            samples[os.path.splitext(os.path.basename(path))[0]] = f.read()
    return samples


def _round_trip(utf8: bytes) -> List[str]:
    """Run one round of every conversion.  Returns the checks that failed."""
    failed: List[str] = []
    try:
        utf32 = to_utf32_from8(utf8)
        if to_utf8_from32(utf32) != utf8:
            failed.append("utf8 <-> utf32")

        utf16 = to_utf16_from32(utf32)
        if to_utf32_from16(utf16) != utf32:
            failed.append("utf16 <-> utf32")

        if to_utf8_from16(utf16) != utf8:
            failed.append("utf16 -> utf8")
        if to_utf16_from8(utf8) != utf16:
            failed.append("utf8 -> utf16")
    except UtfError as e:
        failed.append("error [{}]: {}".format(e.code, e))
    return failed


# ── unittest integration ──────────────────────────────────────

class SampleRoundTripTests(unittest.TestCase):
    """Dynamically generated: one test method per sample file."""
    pass


def _make_test(name: str, data: bytes):
    def test_fn(self: unittest.TestCase) -> None:
        for _ in range(_ROUNDS):
            failed = _round_trip(data)
            self.assertEqual(failed, [], "{}: {}".format(name, ", ".join(failed)))
    return test_fn


# Attach test methods at import time.
try:
    for _name, _data in _load_samples().items():
        _fn = _make_test(_name, _data)
        _fn.__name__ = "test_{}".format(_name)
        _fn.__qualname__ = "SampleRoundTripTests.test_{}".format(_name)
        setattr(SampleRoundTripTests, "test_{}".format(_name), _fn)
except FileNotFoundError:
    pass


# ── Standalone CLI runner ─────────────────────────────────────

def main() -> None:
    global _SAMPLES_DIR

    parser = argparse.ArgumentParser(description="utfconv sample round-trip runner")
    parser.add_argument("--samples-dir", default=None,
                        help="Directory with *.utf8 sample files")
    parser.add_argument("--rounds", type=int, default=10_000,
                        help="Round trips per sample file (default: 10000)")
    args, _remaining = parser.parse_known_args()

    if args.samples_dir:
        _SAMPLES_DIR = args.samples_dir
        os.environ["UTFCONV_SAMPLES_DIR"] = args.samples_dir

    samples = _load_samples()

    passed = 0
    failed = 0
    failures: List[str] = []

    for name, data in samples.items():
        started = time.perf_counter()
        bad: List[str] = []
        for _ in range(args.rounds):
            bad = _round_trip(data)
            if bad:
                break
        elapsed = time.perf_counter() - started
        if bad:
            failed += 1
            failures.append("{}: {}".format(name, ", ".join(bad)))
        else:
            passed += 1
            print("  ok {} ({} bytes, {} rounds, {:.2f}s)".format(
                name, len(data), args.rounds, elapsed))

    total = passed + failed
    print("ROUND-TRIP: {}/{} PASS".format(passed, total))
    for line in failures:
        print("  FAIL {}".format(line))

    sys.exit(1 if failed else 0)


if __name__ == "__main__":
    main()
