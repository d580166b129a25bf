"""A fixed-capacity registry of workers, each with a sector and a salary."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Tuple

from .prompts import InputError, Prompter, format_name

NAME_LENGTH = 51
HEADER = "ID     NAME       LASTNAME     SECTOR     SALARY "
FIRST_ID = 100

_EMPTY_NAME = "nothing"
_SAMPLE = (
    (101, 2, "Martin", "Bukowski", 450.9),
    (102, 3, "Aime", "Escobar", 670.9),
    (103, 3, "Kristine", "Tancredi", 100.2),
    (104, 1, "Yanina", "Paredes", 1022.0),
    (105, 2, "Chris", "Luzkcs", 670.9),
    (106, 2, "Cristal", "Smith", 300.0),
    (107, 1, "Victor", "Bukowski", 333.0),
    (108, 1, "Marina", "Zokovich", 500.0),
)
_MODIFY_MENU = (
    "\nElegir campo a modificar "
    "\n1-Nombre"
    "\n2-Apellido"
    "\n3-Sector"
    "\n4-Salario"
    "\n5-SALIR"
)


@dataclass
class Worker:
    """One slot of the registry; an empty slot holds placeholder values."""

    id: int = 0
    sector: int = 0
    name: str = _EMPTY_NAME
    last_name: str = _EMPTY_NAME
    salary: float = 0.0
    is_empty: bool = True

    def format_row(self) -> str:
        """Return the worker as one line of the listing table."""
        return (
            f"{self.id}    {self.name},     {self.last_name}      "
            f"{self.sector:<5d}  {self.salary:.2f}"
        )


class WorkerRegistry:
    """A fixed number of worker slots; iteration yields the occupied ones."""

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._slots: List[Worker] = [Worker() for _ in range(capacity)]
        self.last_id = FIRST_ID

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __iter__(self) -> Iterator[Worker]:
        return (worker for worker in self._slots if not worker.is_empty)

    def load_sample(self) -> None:
        """Fill the first slots with a fixed set of sample workers."""
        if len(self._slots) < len(_SAMPLE):
            raise ValueError(f"the sample needs room for {len(_SAMPLE)} workers")
        for position, (worker_id, sector, name, last_name, salary) in enumerate(_SAMPLE):
            self._slots[position] = Worker(worker_id, sector, name, last_name, salary, False)
        self.last_id += len(_SAMPLE)

    def find_empty_slot(self) -> int:
        """Return the position of the first free slot."""
        for position, worker in enumerate(self._slots):
            if worker.is_empty:
                return position
        raise LookupError("the registry is full")

    def add(self, name: str, last_name: str, sector: int, salary: float) -> Worker:
        """Store a new worker in the first free slot and give it the next id."""
        position = self.find_empty_slot()
        self.last_id += 1
        worker = Worker(
            self.last_id, sector, format_name(name), format_name(last_name), salary, False
        )
        self._slots[position] = worker
        return worker

    def find_by_id(self, worker_id: int) -> Worker:
        """Return the registered worker with ``worker_id``."""
        for worker in self:
            if worker.id == worker_id:
                return worker
        raise KeyError(worker_id)

    def remove(self, worker_id: int) -> Worker:
        """Free the slot of the worker with ``worker_id`` and return that worker."""
        worker = self.find_by_id(worker_id)
        worker.is_empty = True
        return worker

    def sort_by_last_name(self) -> None:
        """Order slots by last name; equal last names put the higher sector first."""
        self._slots.sort(key=lambda worker: (worker.last_name, -worker.sector))

    def salary_summary(self) -> Tuple[float, int]:
        """Return the average salary and how many workers earn more than it."""
        salaries = [worker.salary for worker in self]
        if not salaries:
            raise ValueError("no workers registered")
        average = sum(salaries) / len(salaries)
        return average, sum(1 for salary in salaries if salary > average)

    def format_table(self) -> str:
        """Return the header followed by one row per registered worker."""
        return "\n".join([HEADER, *(worker.format_row() for worker in self)])


def _show(prompter: Prompter, worker: Worker) -> None:
    prompter.say(HEADER)
    prompter.say(worker.format_row())


def add_worker(registry: WorkerRegistry, prompter: Prompter) -> Worker:
    """Ask for a new worker's data and register it."""
    position = registry.find_empty_slot()
    prompter.say(f"\nPOSICION ENCONTRADA {position}")
    try:
        name = prompter.text("\nIngrese nombre: ", "\nError nombre", NAME_LENGTH)
        last_name = prompter.text("\nIngrese apellido: ", "\nError apellido", NAME_LENGTH)
        sector = prompter.integer("\nIngrese sector 1-3", "\nError sector", 1, 3, 2)
        salary = prompter.real(
            "\nIngrese salario [100-10,000]", "Error salario", 100, 10000, 2
        )
    except InputError:
        prompter.say("\nError carga de empleado")
        raise
    worker = registry.add(name, last_name, sector, salary)
    separator = "_" * 50
    prompter.say(separator)
    _show(prompter, worker)
    prompter.say(separator)
    prompter.say(registry.format_table())
    return worker


def _ask_worker(registry: WorkerRegistry, prompter: Prompter, message: str) -> Worker:
    prompter.say(registry.format_table())
    worker_id = prompter.integer(message, " \nError id", 100, 1000, 2)
    return registry.find_by_id(worker_id)


def modify_worker(registry: WorkerRegistry, prompter: Prompter) -> Worker:
    """Ask for a worker id, then let the user change its fields until exit."""
    try:
        worker = _ask_worker(registry, prompter, "\nIngresar id de empleado para modificar")
    except (InputError, KeyError):
        prompter.say("\n No se encontro ID !")
        raise
    prompter.say("\n__________________USTED SELECCIONO__________________ ")
    _show(prompter, worker)
    prompter.say("\n" + "_" * 52)
    while True:
        try:
            option = prompter.integer(_MODIFY_MENU, "\nError", 1, 5, 2)
        except InputError:
            break
        if option == 5:
            break
        try:
            if option == 1:
                worker.name = prompter.text(
                    "\nIngresar nuevo nombre: ", "Error nombre", NAME_LENGTH
                )
            elif option == 2:
                worker.last_name = prompter.text(
                    "\nIngresar nuevo apellido: ", "error apellido", NAME_LENGTH
                )
            elif option == 3:
                worker.sector = prompter.integer(
                    "\nIngresar sector [1-3]", "\nError sector", 1, 3, 2
                )
            else:
                worker.salary = prompter.real(
                    "\nIngresar salario [100-10,000]", "Error salario", 100, 10000, 2
                )
        except InputError:
            continue
        _show(prompter, worker)
    _show(prompter, worker)
    return worker


def delete_worker(registry: WorkerRegistry, prompter: Prompter) -> bool:
    """Ask for a worker id and remove it after confirmation; tell whether it was removed."""
    worker = _ask_worker(registry, prompter, "\nIngrese id de empleado que desea eliminar ")
    _show(prompter, worker)
    option = prompter.integer(
        "\nEsta seguro que quiere eliminar ? [1 Si] [2 No]", "error Del", 1, 2, 2
    )
    if option != 1:
        return False
    registry.remove(worker.id)
    prompter.say("\nEliminado")
    return True