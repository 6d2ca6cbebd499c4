"""Employee payroll registry - owns employee records and assigns their uids."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any

from payroll.models.employee import Employee, EvalScore, NewEmployee

logger = logging.getLogger(__name__)


class EmployeePayroll:
    """Ordered registry of employees.

    Records are kept in hire order, which is also the order searches and
    listings return them in. Targeted mutations act on the first match only
    and silently do nothing when the target is missing.
    """

    def __init__(self) -> None:
        self._employees: list[Employee] = []
        self._next_uid = 0

    def __len__(self) -> int:
        return len(self._employees)

    def __iter__(self) -> Iterator[Employee]:
        return iter(list(self._employees))

    @property
    def next_uid(self) -> int:
        """The uid the next hire will receive."""
        return self._next_uid

    def hire(self, new_employee: NewEmployee | None = None, **fields: Any) -> Employee:
        """Create a record with the next uid and append it.

        Accepts either a ``NewEmployee`` or its fields as keyword arguments.
        The uid counter advances on every hire and is never rewound.
        """
        if new_employee is None:
            new_employee = NewEmployee(**fields)
        elif fields:
            raise TypeError("Pass either a NewEmployee or keyword fields, not both")

        employee = Employee(uid=self._next_uid, **new_employee.model_dump())
        self._next_uid += 1
        self._employees.append(employee)
        logger.debug("Hired %s as uid %d", employee.full_name, employee.uid)
        return employee

    def fire(self, uid: int) -> bool:
        """Remove the record with ``uid``. Returns False if there was none."""
        for index, employee in enumerate(self._employees):
            if employee.uid == uid:
                del self._employees[index]
                logger.debug("Fired uid %d", uid)
                return True
        logger.debug("Fire: no employee with uid %d", uid)
        return False

    def size(self) -> int:
        return len(self._employees)

    def give_raise(self, uid: int, amount: float) -> None:
        employee = self.find_by_uid(uid)
        if employee is None:
            logger.debug("Raise: no employee with uid %d", uid)
            return
        employee.give_raise(amount)
        logger.debug("Raised uid %d by %.2f", uid, amount)

    def give_raise_by_name(self, first_name: str, last_name: str, amount: float) -> None:
        """Raise the earliest-hired employee with this exact first and last name.

        Later employees sharing the name are left untouched.
        """
        for employee in self._employees:
            if employee.first_name == first_name and employee.last_name == last_name:
                employee.give_raise(amount)
                logger.debug("Raised uid %d (%s) by %.2f", employee.uid, employee.full_name, amount)
                return
        logger.debug("Raise: no employee named %s %s", first_name, last_name)

    def set_evaluation(self, uid: int, score: EvalScore) -> None:
        employee = self.find_by_uid(uid)
        if employee is None:
            logger.debug("Evaluation: no employee with uid %d", uid)
            return
        employee.evaluation = score
        logger.debug("Set evaluation of uid %d to %s", uid, score.value)

    def calculate_payroll(self) -> float:
        total = 0.0
        for employee in self._employees:
            total += employee.salary
        return total

    def find_by_uid(self, uid: int) -> Employee | None:
        """Return the live record with ``uid``, or None.

        The returned object is the registry's own record, so later raises or
        evaluation changes are visible through it.
        """
        for employee in self._employees:
            if employee.uid == uid:
                return employee
        return None

    def find_all_by_name(self, first_name: str, last_name: str) -> list[Employee]:
        return [
            e for e in self._employees
            if e.first_name == first_name and e.last_name == last_name
        ]

    def find_by_department(self, department: str) -> list[Employee]:
        return [e for e in self._employees if e.department == department]

    def list_all(self) -> list[Employee]:
        return list(self._employees)
