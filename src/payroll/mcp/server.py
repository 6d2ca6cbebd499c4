"""Payroll MCP Server.

Exposes the employee payroll registry as MCP tools so that AI agents can
hire, look up and update employees via the Model Context Protocol.

Usage:
    python -m payroll.mcp.server          # stdio mode
    fastmcp run src/payroll/mcp/server.py # via CLI
"""

from __future__ import annotations

import threading
from typing import Any

from fastmcp import FastMCP

from payroll.io.formatting import format_money
from payroll.models.employee import Employee, EvalScore, NewEmployee
from payroll.models.settings import PayrollSettings
from payroll.registry import EmployeePayroll

# ---------------------------------------------------------------------------
# Server instance
# ---------------------------------------------------------------------------
mcp = FastMCP(
    name="payroll",
    instructions="""
    Payroll is an in-memory employee registry for one server session.

    Every employee gets a numeric uid when hired; uids are never reused.
    Targeted updates (fire, raise, evaluation) quietly do nothing when the
    uid or name is unknown, so check the returned status or use the find
    tools first. Raising by name only affects the earliest-hired employee
    with that exact first and last name.
    """,
)

# ---------------------------------------------------------------------------
# In-memory registry state (per server session)
# ---------------------------------------------------------------------------
_payroll_state: dict[str, Any] = {}

# Tool calls may arrive on worker threads; every registry access holds this lock.
_payroll_lock = threading.Lock()


def _get_payroll() -> EmployeePayroll:
    if "payroll" not in _payroll_state:
        _payroll_state["payroll"] = EmployeePayroll()
    return _payroll_state["payroll"]


def _get_settings() -> PayrollSettings:
    if "settings" not in _payroll_state:
        _payroll_state["settings"] = PayrollSettings.from_env()
    return _payroll_state["settings"]


def _employee_dict(employee: Employee) -> dict[str, Any]:
    return employee.model_dump(mode="json")


def _employee_list(employees: list[Employee]) -> dict[str, Any]:
    return {
        "count": len(employees),
        "employees": [_employee_dict(e) for e in employees],
    }


def _not_found(**keys: Any) -> dict[str, Any]:
    return {"status": "not_found", **keys}


# ---------------------------------------------------------------------------
# Tool 1: hire_employee
# ---------------------------------------------------------------------------
@mcp.tool
def hire_employee(
    first_name: str,
    last_name: str,
    age: int,
    department: str = "",
    supervisor: str = "",
    position: str = "",
    salary: float = 0.0,
) -> dict[str, Any]:
    """Hire a new employee and assign the next uid.

    The evaluation of a new employee is AVERAGE. Duplicate names are allowed.

    Args:
        first_name: Given name.
        last_name: Family name.
        age: Age in years.
        department: Department name, e.g. "Engineering".
        supervisor: Name of the direct supervisor.
        position: Job title.
        salary: Annual salary.

    Returns:
        The new employee record and the current headcount.
    """
    new_employee = NewEmployee(
        first_name=first_name,
        last_name=last_name,
        age=age,
        department=department,
        supervisor=supervisor,
        position=position,
        salary=salary,
    )
    with _payroll_lock:
        payroll = _get_payroll()
        employee = payroll.hire(new_employee)
        return {
            "status": "ok",
            "employee": _employee_dict(employee),
            "headcount": payroll.size(),
        }


# ---------------------------------------------------------------------------
# Tool 2: fire_employee
# ---------------------------------------------------------------------------
@mcp.tool
def fire_employee(uid: int) -> dict[str, Any]:
    """Remove the employee with the given uid.

    Args:
        uid: Identifier returned by hire_employee.

    Returns:
        Status "ok" if an employee was removed, "not_found" otherwise, plus the headcount.
    """
    with _payroll_lock:
        payroll = _get_payroll()
        removed = payroll.fire(uid)
        return {
            "status": "ok" if removed else "not_found",
            "uid": uid,
            "headcount": payroll.size(),
        }


# ---------------------------------------------------------------------------
# Tool 3: give_raise
# ---------------------------------------------------------------------------
@mcp.tool
def give_raise(uid: int, amount: float) -> dict[str, Any]:
    """Add an amount to an employee's salary. Negative amounts lower it.

    Args:
        uid: Identifier of the employee.
        amount: Amount to add to the current salary.

    Returns:
        The updated employee record, or status "not_found".
    """
    with _payroll_lock:
        payroll = _get_payroll()
        if payroll.find_by_uid(uid) is None:
            return _not_found(uid=uid)
        payroll.give_raise(uid, amount)
        return {"status": "ok", "employee": _employee_dict(payroll.find_by_uid(uid))}


# ---------------------------------------------------------------------------
# Tool 4: give_raise_by_name
# ---------------------------------------------------------------------------
@mcp.tool
def give_raise_by_name(first_name: str, last_name: str, amount: float) -> dict[str, Any]:
    """Add an amount to the salary of the earliest-hired employee with this exact name.

    Names are matched case-sensitively. If several employees share the name,
    only the first one hired is changed; use give_raise with a uid to target
    another one.

    Args:
        first_name: Exact first name.
        last_name: Exact last name.
        amount: Amount to add to the current salary.

    Returns:
        The updated employee record, how many employees share the name, or status "not_found".
    """
    with _payroll_lock:
        payroll = _get_payroll()
        matches = payroll.find_all_by_name(first_name, last_name)
        if not matches:
            return _not_found(first_name=first_name, last_name=last_name)
        payroll.give_raise_by_name(first_name, last_name, amount)
        return {
            "status": "ok",
            "employee": _employee_dict(matches[0]),
            "same_name_count": len(matches),
        }


# ---------------------------------------------------------------------------
# Tool 5: set_evaluation
# ---------------------------------------------------------------------------
@mcp.tool
def set_evaluation(uid: int, evaluation: str) -> dict[str, Any]:
    """Set an employee's performance evaluation.

    Args:
        uid: Identifier of the employee.
        evaluation: One of "SUPERB", "ABOVE_AVERAGE", "AVERAGE",
            "BELOW_AVERAGE", "UNSATISFACTORY".

    Returns:
        The updated employee record, status "not_found", or status "error" for an unknown evaluation.
    """
    try:
        score = EvalScore(evaluation)
    except ValueError:
        return {
            "status": "error",
            "message": f"Unknown evaluation: {evaluation}",
            "available_evaluations": [s.value for s in EvalScore],
        }

    with _payroll_lock:
        payroll = _get_payroll()
        if payroll.find_by_uid(uid) is None:
            return _not_found(uid=uid)
        payroll.set_evaluation(uid, score)
        return {"status": "ok", "employee": _employee_dict(payroll.find_by_uid(uid))}


# ---------------------------------------------------------------------------
# Tool 6: list_employees
# ---------------------------------------------------------------------------
@mcp.tool
def list_employees() -> dict[str, Any]:
    """List every current employee in hire order.

    Returns:
        Employee count and records.
    """
    with _payroll_lock:
        return _employee_list(_get_payroll().list_all())


# ---------------------------------------------------------------------------
# Tool 7: find_employee
# ---------------------------------------------------------------------------
@mcp.tool
def find_employee(uid: int) -> dict[str, Any]:
    """Look up one employee by uid.

    Args:
        uid: Identifier of the employee.

    Returns:
        The employee record, or status "not_found" for unknown or fired uids.
    """
    with _payroll_lock:
        employee = _get_payroll().find_by_uid(uid)
        if employee is None:
            return _not_found(uid=uid)
        return {"status": "ok", "employee": _employee_dict(employee)}


# ---------------------------------------------------------------------------
# Tool 8: find_employees_by_name
# ---------------------------------------------------------------------------
@mcp.tool
def find_employees_by_name(first_name: str, last_name: str) -> dict[str, Any]:
    """Find all employees with this exact first and last name, in hire order.

    Args:
        first_name: Exact first name.
        last_name: Exact last name.

    Returns:
        Match count and records (empty when nobody matches).
    """
    with _payroll_lock:
        return _employee_list(_get_payroll().find_all_by_name(first_name, last_name))


# ---------------------------------------------------------------------------
# Tool 9: find_employees_by_department
# ---------------------------------------------------------------------------
@mcp.tool
def find_employees_by_department(department: str) -> dict[str, Any]:
    """Find all employees in a department (exact match), in hire order.

    Args:
        department: Department name.

    Returns:
        Match count and records (empty when nobody matches).
    """
    with _payroll_lock:
        return _employee_list(_get_payroll().find_by_department(department))


# ---------------------------------------------------------------------------
# Tool 10: calculate_payroll
# ---------------------------------------------------------------------------
@mcp.tool
def calculate_payroll() -> dict[str, Any]:
    """Total the salaries of all current employees.

    Returns:
        Total as a number and as formatted text, plus the headcount.
    """
    with _payroll_lock:
        payroll = _get_payroll()
        total = payroll.calculate_payroll()
        headcount = payroll.size()
        currency_symbol = _get_settings().currency_symbol
    return {
        "total": total,
        "formatted": format_money(total, currency_symbol),
        "headcount": headcount,
    }


if __name__ == "__main__":
    mcp.run()
