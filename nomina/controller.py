"""Operations on the employee list: loading, saving, and interactive edits."""

from __future__ import annotations

from typing import Optional, Union
import os

from .employee import (
    NAME_SIZE,
    Employee,
    compare_by_id,
    compare_by_name,
    compare_by_salary,
    edit_employee as _edit_record,
    format_employees,
)
from .linkedlist import ASCENDING, DESCENDING, LinkedList
from .parser import employees_from_binary, employees_from_text, write_record
from .prompts import InputError, Prompter

PathLike = Union[str, "os.PathLike[str]"]

TEXT_HEADER = "id,nombre,horasTrabajadas,sueldo"

_ORDER_MENU = "\nOrdenar : \n1)Ascendente\n2)Descendente"
_CRITERION_MENU = (
    "\nSeleccione tipo de ordenamiento"
    "\n1)Ordenar por id"
    "\n2)Ordenar por nombre"
    "\n3)Ordenar por salario"
)
_CRITERIA = {1: compare_by_id, 2: compare_by_name, 3: compare_by_salary}
_ORDERS = {1: ASCENDING, 2: DESCENDING}


def load_from_text(path: PathLike, employees: LinkedList) -> int:
    """Append the employees of a CSV file to ``employees``; return how many were read."""
    with open(path, encoding="utf-8", newline="") as stream:
        loaded = employees_from_text(stream)
    for employee in loaded:
        employees.add(employee)
    return len(loaded)


def load_from_binary(path: PathLike, employees: LinkedList) -> int:
    """Append the employees of a binary record file to ``employees``; return how many."""
    with open(path, "rb") as stream:
        loaded = employees_from_binary(stream)
    for employee in loaded:
        employees.add(employee)
    return len(loaded)


def index_from_id(employees: LinkedList, employee_id: int) -> int:
    """Return the position of the employee with ``employee_id``."""
    for position, employee in enumerate(employees):
        if employee.id == employee_id:
            return position
    raise KeyError(employee_id)


def last_id(employees: LinkedList) -> int:
    """Return the highest id in the list, or 0 when it is empty."""
    return max((employee.id for employee in employees), default=0)


def add_employee(employees: LinkedList, prompter: Prompter) -> Employee:
    """Ask for a new employee's data, give it the next id and append it."""
    try:
        name = prompter.text("\nIngrese nombre empleado", "error", NAME_SIZE)
        hours = prompter.integer("\nCuantas horas trabajo?", "error", 1, 900, 2)
        salary = prompter.real("\nIngrese salario", "error", 1.0, 999999, 2)
    except InputError:
        prompter.say("\nError carga de datos")
        raise
    employee = Employee(last_id(employees) + 1, name, hours, salary)
    employees.add(employee)
    prompter.say(employee.format())
    prompter.say("\nAgregado correctamente")
    return employee


def _ask_position(employees: LinkedList, prompter: Prompter, message: str) -> int:
    maximum = max(last_id(employees), 1)
    prompter.say(format_employees(employees))
    employee_id = prompter.integer(message, "Error ", 1, maximum, 2)
    return index_from_id(employees, employee_id)


def edit_employee(employees: LinkedList, prompter: Prompter) -> Employee:
    """Ask for an employee id and let the user edit that employee."""
    if employees.is_empty():
        raise LookupError("no employees loaded")
    try:
        position = _ask_position(
            employees, prompter, "\nIngrese el ID del empleado para editar: "
        )
    except (InputError, KeyError):
        prompter.say("\n No se encontro ID")
        raise
    return _edit_record(employees.get(position), prompter)


def remove_employee(employees: LinkedList, prompter: Prompter) -> Optional[Employee]:
    """Ask for an employee id and remove it after confirmation.

    Returns the removed employee, or None when the user declines.
    """
    try:
        position = _ask_position(
            employees, prompter, "\nIngrese el ID del empleado para eliminar: "
        )
    except (InputError, KeyError):
        prompter.say("Error controllerfromID")
        raise
    confirmation = prompter.integer(
        "\nSeguro de eliminar registro?\n1)SI\n2)NO", "error", 1, 2, 1
    )
    if confirmation != 1:
        return None
    removed = employees.pop(position)
    prompter.say("\nEliminado ")
    return removed


def list_employees(employees: LinkedList, prompter: Prompter) -> None:
    """Show every employee and the count."""
    prompter.say(format_employees(employees))


def sort_employees(employees: LinkedList, prompter: Prompter) -> None:
    """Ask for a direction and a criterion, sort the list and show it."""
    order = prompter.integer(_ORDER_MENU, "Error", 1, 2, 1)
    criterion = prompter.integer(_CRITERION_MENU, "error", 1, 3, 2)
    prompter.say("\n Aguarde unos segundos...")
    employees.sort(_CRITERIA[criterion], _ORDERS[order])
    prompter.say(format_employees(employees))


def save_as_text(path: PathLike, employees: LinkedList) -> int:
    """Write the employees as CSV with a header line; return how many were written."""
    count = 0
    with open(path, "w", encoding="utf-8", newline="") as stream:
        stream.write(f"{TEXT_HEADER}\n")
        for employee in employees:
            stream.write(
                f"{employee.id},{employee.name},{employee.hours_worked},"
                f"{employee.salary:.2f}\n"
            )
            count += 1
    return count


def save_as_binary(path: PathLike, employees: LinkedList) -> int:
    """Write the employees as binary records; return how many were written."""
    count = 0
    with open(path, "wb") as stream:
        for employee in employees:
            write_record(stream, employee)
            count += 1
    return count