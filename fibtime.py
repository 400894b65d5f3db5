#!/usr/bin/env python3
"""
fibtime - recursive Fibonacci timing benchmark
Times one naive recursive fib(40) call and prints the elapsed milliseconds.
"""

import sys
import time
import logging
from typing import Callable
from dataclasses import dataclass

# ============================================================================
# Configuration
# ============================================================================

VERSION = "1.0.0"
FIB_INPUT = 40

logger = logging.getLogger("fibtime")
logger.addHandler(logging.NullHandler())

# ============================================================================
# Errors
# ============================================================================

class BenchmarkError(Exception):
    """Base exception for benchmark errors"""
    pass

class ValidationError(BenchmarkError):
    """Invalid benchmark input"""
    pass

# ============================================================================
# Evaluator
# ============================================================================

def _fib(n):
    if n < 2:
        return n
    return _fib(n - 2) + _fib(n - 1)

def fib(n: int) -> int:
    """Return the n-th Fibonacci number by unmemoized binary recursion.

    The input is checked once here; the recursion itself is left bare so
    the timed call does the full exponential amount of work.
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise ValidationError(f"Input must be an integer, got {type(n).__name__}")
    if n < 0:
        raise ValidationError(f"Input must be non-negative: {n}")
    return _fib(n)

# ============================================================================
# Timing harness
# ============================================================================

@dataclass
class Measurement:
    """One timed evaluator call"""
    n: int
    result: int
    elapsed_ms: float

def now_ms() -> float:
    """Monotonic high-resolution timestamp in milliseconds"""
    return time.perf_counter() * 1000

def measure(n: int = FIB_INPUT,
            func: Callable[[int], int] = fib,
            clock: Callable[[], float] = now_ms) -> Measurement:
    """Time a single call of func(n) between two reads of clock"""
    logger.debug(f"Timing fib({n})")

    start = clock()
    result = func(n)
    end = clock()

    elapsed = end - start
    logger.debug(f"fib({n}) = {result}")
    logger.info(f"fib({n}) took {elapsed} ms")
    return Measurement(n=n, result=result, elapsed_ms=elapsed)

def format_elapsed(elapsed_ms: float) -> str:
    """Default float text of an elapsed time, no rounding"""
    return str(elapsed_ms)

# ============================================================================
# CLI
# ============================================================================

def main() -> int:
    """Main entry point"""
    logger.info(f"fibtime {VERSION} started")

    try:
        measurement = measure(FIB_INPUT)
    except BenchmarkError as e:
        logger.error(f"Benchmark failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(format_elapsed(measurement.elapsed_ms))
    return 0

if __name__ == '__main__':
    sys.exit(main())
