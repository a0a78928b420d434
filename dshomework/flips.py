"""Minimum number of k-length window flips that turn a bit array into all ones."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterable, Sequence

DEFAULT_INPUT = "inputProblem3.txt"
DEFAULT_OUTPUT = "outputProblem3.txt"

_INT = re.compile(r"\s*([+-]?\d+)")


def min_flips(bits: Sequence[int], k: int) -> int:
    """Count greedy window flips needed to make every bit one, or -1 if they fail.

    Scanning left to right, each zero starts a flip of the next ``k`` bits.
    Whenever a flip turns a one into a zero, the window is stretched so that it
    reaches ``k`` bits past that position, and scanning resumes after it.
    Windows never run past the end of the array. The input is not modified.
    """
    if any(bit not in (0, 1) for bit in bits):
        raise ValueError("bits must be 0 or 1")
    arr = list(bits)
    n = len(arr)
    count = 0
    stop = min(n - k + 1, n)
    i = 0
    while i < stop:
        if arr[i] == 0:
            count += 1
            j = i
            while j < min(i + k, n):
                arr[j] = 1 - arr[j]
                if arr[j] == 0:
                    i = j
                j += 1
        i += 1
    return -1 if 0 in arr else count


def parse_line(line: str) -> tuple[list[int], int]:
    """Split a line such as ``[0,1,1,0] 2`` into its bits and its window length.

    Only the characters 0 and 1 inside brackets count as bits; the window
    length is the integer that follows the first closing bracket.
    """
    bits: list[int] = []
    in_array = False
    for ch in line:
        if ch == "[":
            in_array = True
        elif ch == "]":
            in_array = False
        elif in_array and ch in "01":
            bits.append(int(ch))

    rest = line[line.find("]") + 1:]
    match = _INT.match(rest)
    if match is None:
        raise ValueError(f"no window length in line: {line!r}")
    return bits, int(match.group(1))


def solve_lines(lines: Iterable[str]) -> list[int]:
    """Answer every input line in turn."""
    return [min_flips(*parse_line(line.rstrip("\n"))) for line in lines]


def main(argv: list[str] | None = None) -> int:
    """Read one problem per line and write one answer per line."""
    parser = argparse.ArgumentParser(description="Solve minimum window flip problems.")
    parser.add_argument("input", nargs="?", default=DEFAULT_INPUT)
    parser.add_argument("output", nargs="?", default=DEFAULT_OUTPUT)
    args = parser.parse_args(argv)

    try:
        with open(args.input, encoding="utf-8") as handle:
            lines = handle.readlines()
    except OSError:
        print("File does not open")
        return 1
    print("File open successfully!!")

    try:
        results = solve_lines(lines)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    with open(args.output, "w", encoding="utf-8") as handle:
        handle.writelines(f"{result}\n" for result in results)
    print("done successfully!!")
    return 0


if __name__ == "__main__":
    sys.exit(main())