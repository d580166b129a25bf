# nomina

A small console program for keeping payroll records of employees. Each
record holds an id, a name, the hours worked and a salary. You can load
records from a comma-separated text file or from a file of fixed-size
binary records, and save them to either kind of file. From a menu you can
also add, edit, remove, list and sort records.

## Installing

    pip install .

## Running

    nomina

By default the program reads and writes `data.csv` and `data.bin` in the
current directory. Other files can be given:

    nomina --text staff.csv --binary staff.bin

The menu prompts are in Spanish and offer these options:

1. Load employees from the text file
2. Load employees from the binary file
3. Add an employee
4. Edit an employee
5. Remove an employee
6. List all employees
7. Sort employees by id, name or salary, ascending or descending
8. Save employees to the text file
9. Save employees to the binary file
10. Quit

Loading rules:

- Once a list has been loaded from either file, the text file cannot be
  loaded again.
- The binary file cannot be loaded after the text file.
- A load counts as done even when the file could not be read.

Options 3 to 8 do nothing until a load has been done. Saving as binary
(option 9) is always available. The menu also ends when input runs out.

The text file starts with a header line, `id,nombre,horasTrabajadas,sueldo`.
Each line after it has the form `id,name,hours,salary`, and salaries are
written with two decimals. A binary record is little-endian and holds:

- the id, a 32-bit integer
- the name, a NUL-padded 128-byte UTF-8 field
- the hours, a 32-bit integer
- the salary, a 32-bit float

## Using the library

The package also holds the pieces the program is built from:

- `nomina.linkedlist.LinkedList` is a singly linked list whose elements
  are compared by identity. It offers `get`, `set`, `push`, `pop`,
  `remove`, `index_of`, `contains_all`, `sub_list`, `clone` and `sort`
  with a three-way comparison function. `sort` takes an order of `1`
  for ascending or `0` for descending. An index out of range raises
  `IndexError`.
- `nomina.prompts.Prompter` reads validated input with a limited number
  of attempts: `text`, `integer`, `real` and `binary`. When the attempts
  run out it raises `InputError`, and at the end of input it raises
  `EOFError`. The module also has the helpers `is_numeric`, `is_float`,
  `is_binary`, `format_name`, `round_decimal` and `sort_numbers`.
- `nomina.employee.Employee` is the employee record. It has `format()`
  for a listing line, and `to_bytes()` and `from_bytes()` for the binary
  record. The module also has `compare_by_id`, `compare_by_name`,
  `compare_by_hours`, `compare_by_salary`, `format_employees` and
  `edit_employee`.
- `nomina.parser` reads and writes the files: `employees_from_text` and
  `employees_from_binary` read from open files, and `read_record` and
  `write_record` handle single binary records. Unreadable data raises
  `ParseError`.
- `nomina.controller` holds the menu's actions over a `LinkedList` of
  employees:
  - loading: `load_from_text`, `load_from_binary`
  - saving: `save_as_text`, `save_as_binary`
  - lookup: `index_from_id`, `last_id`
  - interactive actions: `add_employee`, `edit_employee`,
    `remove_employee`, `list_employees`, `sort_employees`
- `nomina.cli.run` runs the menu with a given `Prompter` and returns the
  final list. `nomina.cli.main` is the command's entry point.
- `nomina.workers.WorkerRegistry` is a fixed-capacity registry of
  `Worker` records, each with a sector. It can load a sample set, add,
  find and remove workers, sort them by last name and give a salary
  summary. `add_worker`, `modify_worker` and `delete_worker` drive it
  interactively through a `Prompter`.

Sorting a list:

    from nomina.linkedlist import LinkedList

    items = LinkedList([3, 1, 2])
    items.sort(lambda a, b: (a > b) - (a < b), 1)
    print(list(items))  # [1, 2, 3]

## What it does not do

The worker registry in `nomina.workers` has no command or menu of its own.
It is used only from Python code. Its records are not saved to any file.

## Tests

    pip install .[test]
    pytest