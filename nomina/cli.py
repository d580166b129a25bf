"""Interactive menu for managing the employee list."""

from __future__ import annotations

import argparse
from typing import List, Optional

from . import controller
from .linkedlist import LinkedList
from .parser import ParseError
from .prompts import InputError, Prompter

MENU = (
    "1. Cargar datos de empleados desde data.csv (modo texto)."
    "\n2. Cargar datos de empleados desde  data.bin (modo binario)."
    "\n3. Agregar empleado "
    "\n4. Modificar datos de empleado"
    "\n5. Eliminar empleado "
    "\n6. Listar todos los empleados"
    "\n7. Ordenar empleados "
    "\n8. Guardar informacion de empleados al archivo data.csv (modo texto)."
    "\n9. Guardar informacion de empleados al archivo data.bin (modo binario)."
    "\n10. SALIR "
)
EXIT = 10

_ACTIONS = {
    3: controller.add_employee,
    4: controller.edit_employee,
    5: controller.remove_employee,
    6: controller.list_employees,
    7: controller.sort_employees,
}


def run(
    prompter: Prompter, text_path: str = "data.csv", binary_path: str = "data.bin"
) -> LinkedList:
    """Run the menu until the user exits or input ends; return the final list."""
    employees = LinkedList()
    text_loaded = binary_loaded = False
    while True:
        try:
            option = prompter.integer(MENU, "Error...", 1, EXIT, 1)
        except InputError:
            continue
        except EOFError:
            break
        loaded = text_loaded or binary_loaded
        try:
            if option == 1:
                if loaded:
                    prompter.say("\n Ya cargaste una lista anteriormente")
                    continue
                text_loaded = True
                try:
                    controller.load_from_text(text_path, employees)
                except OSError:
                    prompter.say("El archivo no pudo ser abierto\n")
                else:
                    prompter.say("\n#  Carga de texto exitosa   #\n")
            elif option == 2:
                if text_loaded:
                    prompter.say("\nYa cargaste una lista anteriormente")
                    continue
                binary_loaded = True
                try:
                    controller.load_from_binary(binary_path, employees)
                except (OSError, ParseError):
                    prompter.say("\nError en carga")
                else:
                    prompter.say("\n#  Carga binaria exitosa   #\n")
            elif option in _ACTIONS:
                if loaded:
                    _ACTIONS[option](employees, prompter)
            elif option == 8:
                if loaded:
                    controller.save_as_text(text_path, employees)
                    prompter.say("\nGuardado !")
            elif option == 9:
                controller.save_as_binary(binary_path, employees)
                prompter.say("\nGuardado !")
            else:
                employees.clear()
                prompter.say("Hasta luego..")
                break
        except EOFError:
            break
        except (InputError, KeyError, LookupError, ParseError) as error:
            prompter.say(f"\n{error}")
        except OSError as error:
            prompter.say(f"\nNo se pudo acceder al archivo: {error}")
    return employees


def main(argv: Optional[List[str]] = None) -> int:
    """Start the interactive menu."""
    parser = argparse.ArgumentParser(description="Manage a list of employees.")
    parser.add_argument("--text", default="data.csv", help="CSV file to load and save")
    parser.add_argument("--binary", default="data.bin", help="binary file to load and save")
    args = parser.parse_args(argv)
    run(Prompter(), args.text, args.binary)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())