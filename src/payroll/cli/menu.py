"""Interactive payroll menu.

Usage:
    python -m payroll
    python -m payroll --log-level DEBUG --log-file payroll.log
"""

from __future__ import annotations

import argparse
import logging

from payroll.io.formatting import format_employee, format_employees, format_money
from payroll.io.prompts import (
    read_eval_score,
    read_float,
    read_int,
    read_line,
    read_uint,
)
from payroll.logging_config import setup_logging
from payroll.models.employee import NewEmployee
from payroll.models.settings import PayrollSettings
from payroll.registry import EmployeePayroll

logger = logging.getLogger(__name__)

# Menu number -> (label, action). Each action is handled by _handle_<action>.
MENU_ACTIONS: dict[int, tuple[str, str]] = {
    1: ("Hire Employee", "hire"),
    2: ("Fire Employee (by UID)", "fire"),
    3: ("Give Raise (by UID)", "raise_by_uid"),
    4: ("Give Raise (by Name)", "raise_by_name"),
    5: ("Set Evaluation (by UID)", "set_evaluation"),
    6: ("List All Employees", "list_all"),
    7: ("Find Employee by UID", "find_by_uid"),
    8: ("Find Employees by Name", "find_by_name"),
    9: ("Find Employees by Department", "find_by_department"),
    10: ("Show Total Payroll", "total_payroll"),
}
EXIT_CHOICE = 0


def print_menu() -> None:
    print("\n *** Payroll System *** ")
    for number, (label, _action) in MENU_ACTIONS.items():
        print(f"{number}. {label}")
    print(f"{EXIT_CHOICE}. Exit")


class PayrollMenu:
    """One interactive session over a payroll registry."""

    def __init__(
        self,
        payroll: EmployeePayroll | None = None,
        settings: PayrollSettings | None = None,
    ) -> None:
        self.payroll = payroll if payroll is not None else EmployeePayroll()
        self.settings = settings or PayrollSettings()

    def run(self) -> None:
        """Loop until the user picks Exit or input ends."""
        try:
            while True:
                print_menu()
                choice = read_int("Select option: ")
                if choice == EXIT_CHOICE:
                    print("Goodbye!")
                    return
                self.dispatch(choice)
        except (EOFError, KeyboardInterrupt):
            logger.info("Input closed, ending session")
            print()

    def dispatch(self, choice: int) -> None:
        entry = MENU_ACTIONS.get(choice)
        if entry is None:
            print("Invalid choice.")
            return
        _label, action = entry
        handler = getattr(self, f"_handle_{action}")
        handler()

    def _print_employees(self, employees) -> None:
        if not employees:
            print("No matches.")
            return
        print(format_employees(employees, self.settings.currency_symbol), end="")

    # ─── Actions ─────────────────────────────────────

    def _handle_hire(self) -> None:
        new_employee = NewEmployee(
            first_name=read_line("First name: "),
            last_name=read_line("Last name: "),
            age=read_int("Age: "),
            department=read_line("Department: "),
            supervisor=read_line("Supervisor: "),
            position=read_line("Position: "),
            salary=read_float("Salary: "),
        )
        self.payroll.hire(new_employee)
        print(f"Hired. Current headcount: {self.payroll.size()}")

    def _handle_fire(self) -> None:
        uid = read_uint("UID to fire: ")
        self.payroll.fire(uid)
        print(f"If found, employee was removed. Headcount: {self.payroll.size()}")

    def _handle_raise_by_uid(self) -> None:
        uid = read_uint("UID for raise: ")
        amount = read_float("Raise amount: ")
        self.payroll.give_raise(uid, amount)
        print("If found, raise applied.")

    def _handle_raise_by_name(self) -> None:
        first_name = read_line("First name: ")
        last_name = read_line("Last name: ")
        amount = read_float("Raise amount: ")
        self.payroll.give_raise_by_name(first_name, last_name, amount)
        print("If found, raise applied.")

    def _handle_set_evaluation(self) -> None:
        uid = read_uint("UID for evaluation: ")
        score = read_eval_score()
        self.payroll.set_evaluation(uid, score)
        print("If found, evaluation updated.")

    def _handle_list_all(self) -> None:
        employees = self.payroll.list_all()
        print(format_employees(employees, self.settings.currency_symbol), end="")

    def _handle_find_by_uid(self) -> None:
        uid = read_uint("UID to find: ")
        employee = self.payroll.find_by_uid(uid)
        if employee is None:
            print(f"No employee with UID {uid} found.")
            return
        print(format_employee(employee, self.settings.currency_symbol), end="")

    def _handle_find_by_name(self) -> None:
        first_name = read_line("First name: ")
        last_name = read_line("Last name: ")
        self._print_employees(self.payroll.find_all_by_name(first_name, last_name))

    def _handle_find_by_department(self) -> None:
        department = read_line("Department: ")
        self._print_employees(self.payroll.find_by_department(department))

    def _handle_total_payroll(self) -> None:
        total = self.payroll.calculate_payroll()
        print(f"Total Payroll: {format_money(total, self.settings.currency_symbol)}")


def main(argv: list[str] | None = None) -> None:
    settings = PayrollSettings.from_env()

    parser = argparse.ArgumentParser(description="Interactive employee payroll registry")
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level (default: %(default)s)")
    parser.add_argument("--log-file", default=settings.log_file, help="Optional log file path")
    args = parser.parse_args(argv)

    settings = settings.model_copy(update={"log_level": args.log_level, "log_file": args.log_file})
    setup_logging(settings.log_level, settings.log_file)

    PayrollMenu(settings=settings).run()


if __name__ == "__main__":
    main()
