import math
import re
import sys
from typing import List, MutableSequence, Optional

INVALID_INPUT = "Invalid input, use spaces between numbers only."

# plain decimal literals only: no digit separators, no non-ASCII digits
_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


class EmptyInputError(ValueError):
    """Raised when a median is requested for an empty sequence."""


def partition(seq: MutableSequence[float], low: int, high: int) -> int:
    """
    Lomuto partition of seq[low..high] around the last element.

    Returns the pivot's final index; everything left of it is <= pivot.
    """
    pivot = seq[high]
    i = low
    for j in range(low, high):
        if seq[j] <= pivot:
            seq[i], seq[j] = seq[j], seq[i]
            i += 1
    seq[i], seq[high] = seq[high], seq[i]
    return i


def sort(seq: MutableSequence[float], low: int = 0, high: Optional[int] = None):
    """
    Quicksort seq[low..high] in place and return seq.

    Pivot is always the last element of the range, so already sorted or
    reverse sorted input is O(n^2). Ranges are kept on an explicit stack
    instead of recursing, so that worst case never hits the recursion limit.
    """
    if high is None:
        high = len(seq) - 1

    pending = [(low, high)]
    while pending:
        lo, hi = pending.pop()
        if lo >= hi:
            continue
        p = partition(seq, lo, hi)
        pending.append((p + 1, hi))
        pending.append((lo, p - 1))
    return seq


def median_of(seq: MutableSequence[float]) -> float:
    """
    Sort seq in place and return its median.

    Callers that need the original order should pass a copy.
    """
    if len(seq) == 0:
        raise EmptyInputError("Empty array")

    sort(seq)

    n = len(seq)
    if n % 2 == 0:
        return (seq[n // 2 - 1] + seq[n // 2]) / 2
    return float(seq[n // 2])


def parse_numbers(line: str) -> List[float]:
    """Split a line on whitespace into finite floats."""
    tokens = line.split()
    if not tokens:
        raise ValueError(INVALID_INPUT)

    numbers = []
    for token in tokens:
        if not _NUMBER.fullmatch(token):
            raise ValueError(INVALID_INPUT)
        value = float(token)
        # huge exponents overflow to inf
        if not math.isfinite(value):
            raise ValueError(INVALID_INPUT)
        numbers.append(value)
    return numbers


def format_number(value: float) -> str:
    # 3.0 -> "3", 2.5 -> "2.5"
    if value.is_integer():
        return str(int(value))
    return repr(value)


def main() -> None:
    print("Enter numbers separated by spaces (e.g. 1 2 3 4 5):")
    try:
        numbers = parse_numbers(input("> "))
    except (ValueError, EOFError):
        print(INVALID_INPUT, file=sys.stderr)
        sys.exit(1)

    print(f"Median: {format_number(median_of(numbers))}")


if __name__ == "__main__":
    main()
