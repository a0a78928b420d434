"""Emergency room triage: patients treated by severity, then by arrival time."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterable
from dataclasses import dataclass

DEFAULT_INPUT = "inputProblem4.txt"
DEFAULT_OUTPUT = "outputProblem4.txt"

MAX_PATIENTS = 1000
MAX_TEST_CASES = 10
MAX_PATIENTS_PER_TEST = 100

_INT = re.compile(r"\s*([+-]?\d+)")


class HeapFullError(OverflowError):
    """Raised when the heap already holds its maximum number of patients."""


@dataclass
class Patient:
    name: str
    severity: int = 0
    arrival_time: int = 0

    def outranks(self, other: Patient) -> bool:
        """True if this patient must be treated before ``other``."""
        if self.severity != other.severity:
            return self.severity > other.severity
        return self.arrival_time < other.arrival_time


class PatientHeap:
    """Max-heap of patients: highest severity first, earliest arrival on ties."""

    def __init__(self, capacity: int = MAX_PATIENTS) -> None:
        self._items: list[Patient] = []
        self.capacity = capacity

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def push(self, patient: Patient) -> None:
        """Add a patient; raise HeapFullError when the heap is at capacity."""
        if len(self._items) >= self.capacity:
            raise HeapFullError("Heap full, cannot insert more patients!")
        self._items.append(patient)
        self._sift_up(len(self._items) - 1)

    def pop(self) -> Patient:
        """Remove and return the patient with the highest priority."""
        if not self._items:
            raise IndexError("Heap is empty")
        last = self._items.pop()
        if not self._items:
            return last
        top, self._items[0] = self._items[0], last
        self._sift_down(0)
        return top

    def names(self) -> list[str]:
        """Patient names in the heap's storage order."""
        return [patient.name for patient in self._items]

    def _sift_up(self, index: int) -> None:
        items = self._items
        while index > 0:
            parent = (index - 1) // 2
            if not items[index].outranks(items[parent]):
                break
            items[index], items[parent] = items[parent], items[index]
            index = parent

    def _sift_down(self, index: int) -> None:
        items = self._items
        size = len(items)
        while True:
            best = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and items[child].outranks(items[best]):
                    best = child
            if best == index:
                return
            items[index], items[best] = items[best], items[index]
            index = best


def _field(line: str, marker: str) -> str:
    start = line.find(marker)
    if start < 0:
        raise ValueError(f"missing {marker.strip()} in line: {line!r}")
    return line[start + len(marker):]


def _leading_int(text: str, line: str) -> int:
    match = _INT.match(text)
    if match is None:
        raise ValueError(f"expected a number in line: {line!r}")
    return int(match.group(1))


def parse_patient(line: str) -> Patient:
    """Read a patient from a line such as ``{"name": "A", "severity": 3, "arrival_time": 1}``."""
    name = _field(line, '"name": "')
    end = name.find('"')
    if end >= 0:
        name = name[:end]

    severity_text = _field(line, '"severity":')
    comma = severity_text.find(",")
    if comma >= 0:
        severity_text = severity_text[:comma]

    arrival_text = _field(line, '"arrival_time": ')
    brace = arrival_text.find("}")
    if brace >= 0:
        arrival_text = arrival_text[:brace]

    return Patient(name, _leading_int(severity_text, line), _leading_int(arrival_text, line))


def read_test_cases(lines: Iterable[str]) -> list[list[Patient]]:
    """Group patient lines into test cases separated by blank lines.

    Lines beyond the case or per-case limits are skipped with a warning.
    """
    cases: list[list[Patient]] = []
    current: list[Patient] = []
    for raw in lines:
        line = raw.rstrip("\n")
        if not line:
            if current:
                cases.append(current)
                current = []
            continue
        if len(cases) >= MAX_TEST_CASES or len(current) >= MAX_PATIENTS_PER_TEST:
            print(
                "Warning: Exceeded maximum test cases or patients per test case",
                file=sys.stderr,
            )
            continue
        current.append(parse_patient(line))
    if current:
        cases.append(current)
    return cases


def process_test_case(patients: Iterable[Patient], number: int) -> list[str]:
    """Insert the patients one by one, then treat them; return the report lines."""
    heap = PatientHeap()
    lines = ["", f"=== Test Case #{number} ===", "Inserting patients:"]
    for patient in patients:
        lines.append(f"Inserting: {patient.name}")
        heap.push(patient)
        lines.append(f"Heap: [{', '.join(heap.names())}]")
    lines.extend(["", "Treatment Order:"])
    while heap:
        lines.append(f"Treating: {heap.pop().name}")
    return lines


def main(argv: list[str] | None = None) -> int:
    """Read triage test cases from a file and write the treatment report."""
    parser = argparse.ArgumentParser(description="Simulate emergency room triage.")
    parser.add_argument("input", nargs="?", default=DEFAULT_INPUT)
    parser.add_argument("output", nargs="?", default=DEFAULT_OUTPUT)
    args = parser.parse_args(argv)

    try:
        with open(args.input, encoding="utf-8") as handle:
            cases = read_test_cases(handle)
    except OSError:
        print(f"Error opening file: {args.input}", file=sys.stderr)
        cases = []

    report: list[str] = []
    if not cases:
        report.append("No test cases found in input file.")
    for number, patients in enumerate(cases, start=1):
        report.extend(process_test_case(patients, number))

    try:
        with open(args.output, "w", encoding="utf-8") as handle:
            handle.writelines(f"{line}\n" for line in report)
    except OSError:
        print("Error creating output file!", file=sys.stderr)
        return 1
    print(f"Output saved to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())