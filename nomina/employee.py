"""Employee records: parsing, fixed-size binary records, ordering and display."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import Any, Iterable

from .prompts import InputError, Prompter, _atof, _atoi

NAME_SIZE = 128
_RECORD = struct.Struct(f"<i{NAME_SIZE}sif")
RECORD_SIZE = _RECORD.size

_EDIT_MENU = "\nEditar:\n1)Nombre\n2)Horas trabajadas\n3)Sueldo\n4)Salir"


@dataclass
class Employee:
    """An employee with an id, a name, worked hours and a salary."""

    id: int = 0
    name: str = ""
    hours_worked: int = 0
    salary: float = 0.0

    @classmethod
    def from_strings(
        cls, id_text: str, name: str, hours_text: str, salary_text: str
    ) -> "Employee":
        """Build an employee from text fields; an id that is not positive becomes 0."""
        employee_id = _atoi(id_text)
        return cls(
            id=employee_id if employee_id > 0 else 0,
            name=name,
            hours_worked=_atoi(hours_text),
            salary=_atof(salary_text),
        )

    def format(self) -> str:
        """Return the employee as one listing line."""
        return f" {self.id:4d}  {self.name}  {self.hours_worked}  {self.salary:.2f} "

    def to_bytes(self) -> bytes:
        """Encode the employee as a fixed-size little-endian record."""
        name = self.name.encode("utf-8")[:NAME_SIZE]
        return _RECORD.pack(self.id, name, self.hours_worked, self.salary)

    @classmethod
    def from_bytes(cls, data: bytes) -> "Employee":
        """Decode a record produced by ``to_bytes``."""
        if len(data) != RECORD_SIZE:
            raise ValueError(f"a record is {RECORD_SIZE} bytes, got {len(data)}")
        employee_id, raw_name, hours, salary = _RECORD.unpack(data)
        name = raw_name.split(b"\0", 1)[0].decode("utf-8", errors="replace")
        return cls(employee_id, name, hours, salary)


def _sign(first: Any, second: Any) -> int:
    return (first > second) - (first < second)


def compare_by_id(first: Employee, second: Employee) -> int:
    return _sign(first.id, second.id)


def compare_by_name(first: Employee, second: Employee) -> int:
    return _sign(first.name, second.name)


def compare_by_hours(first: Employee, second: Employee) -> int:
    return _sign(first.hours_worked, second.hours_worked)


def compare_by_salary(first: Employee, second: Employee) -> int:
    return _sign(first.salary, second.salary)


def format_employees(employees: Iterable[Employee]) -> str:
    """Return every employee's line followed by the count."""
    items = list(employees)
    if not items:
        return "No hay empleados cargados\n\n"
    rows = "".join(f"{employee.format()}\n " for employee in items)
    return f"{rows}\nCantidad empleados <{len(items)}>\n"


def edit_employee(employee: Employee, prompter: Prompter) -> Employee:
    """Let the user change the employee's fields until they choose to exit."""
    prompter.say("\n Usted selecciono :")
    prompter.say(employee.format())
    while True:
        try:
            option = prompter.integer(_EDIT_MENU, "Error edit opcion", 1, 4, 2)
        except InputError:
            break
        if option == 4:
            break
        try:
            if option == 1:
                employee.name = prompter.text("Ingrese nuevo nombre", "Error", 120)
                prompter.say("\nNombre actualizado: ")
            elif option == 2:
                prompter.say(employee.format())
                employee.hours_worked = prompter.integer(
                    "\nIngrese nuevas hs trabajadas", "Error", 1, 900, 2
                )
                prompter.say("\nHoras actualizadas: ")
            else:
                prompter.say(employee.format())
                employee.salary = prompter.real(
                    "\nIngrese nuevo salario", "Error", 1, 9999, 2
                )
                prompter.say("\nSalario actualizado: ")
        except InputError:
            continue
        prompter.say(employee.format())
    prompter.say("\nDatos actualizados: ")
    prompter.say(employee.format())
    return employee