"""Reading and writing employees as CSV text or fixed-size binary records."""

from __future__ import annotations

from typing import BinaryIO, Iterable, List, Optional

from .employee import RECORD_SIZE, Employee


class ParseError(ValueError):
    """Raised when employee data cannot be read."""


def employees_from_text(stream: Iterable[str]) -> List[Employee]:
    """Read employees from CSV lines, skipping the header line and blank lines.

    Each line holds id, name, hours and salary; the salary field runs to the
    end of the line.
    """
    employees: List[Employee] = []
    header_seen = False
    for number, raw in enumerate(stream, start=1):
        line = raw.lstrip().rstrip("\r\n")
        if not line:
            continue
        if not header_seen:
            header_seen = True
            continue
        fields = line.split(",", 3)
        if len(fields) != 4 or not all(fields):
            raise ParseError(f"line {number}: expected four comma-separated fields")
        employees.append(Employee.from_strings(*fields))
    return employees


def read_record(stream: BinaryIO) -> Optional[Employee]:
    """Read one binary record, or return None when no whole record is left."""
    data = stream.read(RECORD_SIZE)
    if len(data) < RECORD_SIZE:
        return None
    return Employee.from_bytes(data)


def employees_from_binary(stream: BinaryIO) -> List[Employee]:
    """Read every whole binary record from ``stream``."""
    employees = list(iter(lambda: read_record(stream), None))
    if not employees:
        raise ParseError("no employee records found")
    return employees


def write_record(stream: BinaryIO, employee: Employee) -> None:
    """Write ``employee`` as one binary record."""
    stream.write(employee.to_bytes())