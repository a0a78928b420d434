import pytest

from dshomework.triage import (
    HeapFullError,
    Patient,
    PatientHeap,
    main,
    parse_patient,
    process_test_case,
    read_test_cases,
)


def line_for(name, severity, arrival):
    return f'{{"name": "{name}", "severity": {severity}, "arrival_time": {arrival}}}'


PATIENTS = [
    Patient("Alice", 3, 1),
    Patient("Bob", 7, 2),
    Patient("Cara", 7, 0),
    Patient("Dan", 1, 3),
    Patient("Eve", 5, 4),
    Patient("Finn", 3, 0),
]


def expected_order(patients):
    return [p.name for p in sorted(patients, key=lambda p: (-p.severity, p.arrival_time))]


def test_pop_order_is_severity_then_arrival():
    heap = PatientHeap()
    for patient in PATIENTS:
        heap.push(patient)
    popped = [heap.pop().name for _ in range(len(PATIENTS))]
    assert popped == expected_order(PATIENTS)
    assert len(heap) == 0


def test_root_is_highest_priority_after_each_push():
    heap = PatientHeap()
    for count, patient in enumerate(PATIENTS, start=1):
        heap.push(patient)
        assert heap.names()[0] == expected_order(PATIENTS[:count])[0]
        assert sorted(heap.names()) == sorted(p.name for p in PATIENTS[:count])


def test_pop_empty_raises():
    with pytest.raises(IndexError, match="Heap is empty"):
        PatientHeap().pop()


def test_push_beyond_capacity_raises():
    heap = PatientHeap(capacity=2)
    heap.push(Patient("A", 1, 1))
    heap.push(Patient("B", 1, 2))
    with pytest.raises(HeapFullError):
        heap.push(Patient("C", 1, 3))
    assert len(heap) == 2


def test_parse_patient_round_trip():
    for patient in PATIENTS:
        line = line_for(patient.name, patient.severity, patient.arrival_time)
        assert parse_patient(line) == patient


def test_parse_patient_missing_field_raises():
    with pytest.raises(ValueError):
        parse_patient('{"name": "Alice", "arrival_time": 2}')


def test_read_test_cases_splits_on_blank_lines():
    lines = [
        line_for("A", 1, 1) + "\n",
        line_for("B", 2, 2) + "\n",
        "\n",
        "\n",
        line_for("C", 3, 3) + "\n",
    ]
    cases = read_test_cases(lines)
    assert [[p.name for p in case] for case in cases] == [["A", "B"], ["C"]]


def test_read_test_cases_limits_patients_per_case(capsys):
    lines = [line_for(f"P{i}", 1, i) for i in range(105)]
    cases = read_test_cases(lines)
    assert len(cases) == 1
    assert len(cases[0]) == 100
    assert "Warning" in capsys.readouterr().err


def test_read_test_cases_limits_case_count():
    lines = []
    for i in range(12):
        lines.extend([line_for(f"P{i}", 1, i), ""])
    cases = read_test_cases(lines)
    assert len(cases) == 10
    assert cases[-1][0].name == "P9"


def test_process_test_case_report():
    lines = process_test_case([Patient("Alice", 2, 1)], 3)
    assert lines == [
        "",
        "=== Test Case #3 ===",
        "Inserting patients:",
        "Inserting: Alice",
        "Heap: [Alice]",
        "",
        "Treatment Order:",
        "Treating: Alice",
    ]


def test_process_test_case_treats_in_priority_order():
    lines = process_test_case(PATIENTS, 1)
    treated = [line.removeprefix("Treating: ") for line in lines if line.startswith("Treating: ")]
    assert treated == expected_order(PATIENTS)
    inserted = [line.removeprefix("Inserting: ") for line in lines if line.startswith("Inserting: ")]
    assert inserted == [p.name for p in PATIENTS]


def test_main_writes_report(tmp_path, capsys):
    source = tmp_path / "in.txt"
    target = tmp_path / "out.txt"
    source.write_text(
        line_for("Alice", 1, 1) + "\n\n" + line_for("Bob", 2, 1) + "\n",
        encoding="utf-8",
    )
    assert main([str(source), str(target)]) == 0
    text = target.read_text(encoding="utf-8")
    assert "=== Test Case #1 ===" in text
    assert "=== Test Case #2 ===" in text
    assert "Treating: Bob" in text
    assert f"Output saved to {target}" in capsys.readouterr().out


def test_main_without_cases(tmp_path):
    target = tmp_path / "out.txt"
    assert main([str(tmp_path / "absent.txt"), str(target)]) == 0
    assert target.read_text(encoding="utf-8") == "No test cases found in input file.\n"