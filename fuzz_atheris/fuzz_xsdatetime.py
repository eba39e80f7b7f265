#!/usr/bin/env python3
"""XML Schema dateTime Parser Fuzzer (Atheris).

Targets: xsdatetime.parser, xsdatetime.recognizer
Checks the never-raise contract of parse()/parse_datetime(), field ranges of
every accepted value, and that rejection time stays linear in input length.

Run:
    python fuzz_atheris/fuzz_xsdatetime.py -max_total_time=300

Built for Python 3.13+.
"""

from __future__ import annotations

import atexit
import json
import logging
import sys
import time
from datetime import datetime

# --- PEP 695 Type Aliases ---
type FuzzStats = dict[str, int | str]

_fuzz_stats: FuzzStats = {"status": "incomplete", "iterations": 0, "findings": 0, "accepted": 0}

def _emit_final_report() -> None:
    report = json.dumps(_fuzz_stats)
    print(f"\n[SUMMARY-JSON-BEGIN]{report}[SUMMARY-JSON-END]", file=sys.stderr)

atexit.register(_emit_final_report)

try:
    import atheris
except ImportError:
    sys.exit(1)

logging.getLogger("xsdatetime").setLevel(logging.CRITICAL)

with atheris.instrument_imports(include=["xsdatetime"]):
    from xsdatetime import DateTimeValue, parse, parse_datetime

# Seeds mixed into fuzzed input so mutations start near the grammar.
SEED_FRAGMENTS = [
    "2005-11-14T02:16:38Z",
    "2005-11-14T02:16:38-09:00",
    "2005-11-14T02:16:38.125",
    "-2005-11-14T02:16:38.5+14:00",
    "0000-99-99T99:99:99+99:99",
    " \t\n",
]

# Seconds per character allowed before a parse is reported as too slow.
_MAX_SECONDS_PER_CHAR = 1e-4
_MIN_BUDGET_SECONDS = 0.05

class XSDateTimeFuzzError(Exception):
    """Raised when an invariant breach is detected."""

def _check_value(text: str, value: DateTimeValue) -> None:
    if not 0 <= value.millisecond <= 999:
        msg = f"millisecond out of range for {text!r}: {value!r}"
        raise XSDateTimeFuzzError(msg)
    if value.year < 0:
        msg = f"negative year for {text!r}: {value!r}"
        raise XSDateTimeFuzzError(msg)
    if parse(text) != value:
        msg = f"non-deterministic result for {text!r}"
        raise XSDateTimeFuzzError(msg)

def test_one_input(data: bytes) -> None:
    """Atheris entry point: Test dateTime parsing."""
    _fuzz_stats["iterations"] = int(_fuzz_stats["iterations"]) + 1
    _fuzz_stats["status"] = "running"

    fdp = atheris.FuzzedDataProvider(data)

    # 1. Inputs
    prefix = fdp.ConsumeUnicodeNoSurrogates(8)
    seed = fdp.PickValueInList(SEED_FRAGMENTS) if fdp.ConsumeBool() else ""
    repeat = fdp.ConsumeIntInRange(1, 2000)
    suffix = fdp.ConsumeUnicodeNoSurrogates(8)
    text = prefix + seed + suffix * repeat

    # 2. Execution
    try:
        start = time.perf_counter()
        value = parse(text)
        elapsed = time.perf_counter() - start

        if elapsed > max(_MIN_BUDGET_SECONDS, len(text) * _MAX_SECONDS_PER_CHAR):
            msg = f"parse() took {elapsed:.3f}s for {len(text)} chars"
            raise XSDateTimeFuzzError(msg)

        if value is not None:
            _fuzz_stats["accepted"] = int(_fuzz_stats["accepted"]) + 1
            _check_value(text, value)

        converted = parse_datetime(text)
        if converted is not None and not isinstance(converted, datetime):
            msg = f"parse_datetime returned {type(converted).__name__}"
            raise XSDateTimeFuzzError(msg)

    except XSDateTimeFuzzError:
        _fuzz_stats["findings"] = int(_fuzz_stats["findings"]) + 1
        raise
    except Exception as e:
        # parse() and parse_datetime() must never raise.
        _fuzz_stats["findings"] = int(_fuzz_stats["findings"]) + 1
        msg = f"{type(e).__name__} escaped for {text[:80]!r}: {e}"
        raise XSDateTimeFuzzError(msg) from e


if __name__ == "__main__":
    atheris.Setup(sys.argv, test_one_input)
    atheris.Fuzz()
