"""Plain-text rendering of employee records."""

from __future__ import annotations

from payroll.models.employee import Employee

RECORD_SEPARATOR = "-" * 24


def format_money(amount: float, currency_symbol: str = "$") -> str:
    return f"{currency_symbol}{amount:.2f}"


def format_employee(employee: Employee, currency_symbol: str = "$") -> str:
    """Render one record as a labeled block.

    The block starts with a blank line and a separator rule and ends with a
    newline, so consecutive blocks can be written back to back.
    """
    lines = [
        "",
        RECORD_SEPARATOR,
        f"UID: {employee.uid}",
        f"First Name: {employee.first_name}",
        f"Last Name: {employee.last_name}",
        f"Age: {employee.age}",
        f"Department: {employee.department}",
        f"Supervisor: {employee.supervisor}",
        f"Position: {employee.position}",
        f"Salary: {format_money(employee.salary, currency_symbol)}",
        f"Evaluation: {employee.evaluation.display_name}",
    ]
    return "\n".join(lines) + "\n"


def format_employees(employees: list[Employee], currency_symbol: str = "$") -> str:
    return "".join(format_employee(e, currency_symbol) for e in employees)
