"""Common test fixtures."""

from __future__ import annotations

import builtins
from collections.abc import Callable

import pytest

from payroll.models.employee import NewEmployee
from payroll.registry import EmployeePayroll


@pytest.fixture
def ann_lee() -> NewEmployee:
    return NewEmployee(
        first_name="Ann", last_name="Lee", age=30,
        department="Eng", supervisor="Bob", position="Dev",
        salary=50000.0,
    )


@pytest.fixture
def sam_li() -> NewEmployee:
    return NewEmployee(
        first_name="Sam", last_name="Li", age=40,
        department="Eng", supervisor="Bob", position="Lead",
        salary=80000.0,
    )


@pytest.fixture
def empty_payroll() -> EmployeePayroll:
    return EmployeePayroll()


@pytest.fixture
def staffed_payroll(ann_lee, sam_li) -> EmployeePayroll:
    """Three employees: Ann Lee (uid 0), Sam Li (uid 1), Joe Park in Sales (uid 2)."""
    payroll = EmployeePayroll()
    payroll.hire(ann_lee)
    payroll.hire(sam_li)
    payroll.hire(
        first_name="Joe", last_name="Park", age=25,
        department="Sales", supervisor="Kim", position="Rep",
        salary=40000.0,
    )
    return payroll


@pytest.fixture
def feed_input(monkeypatch) -> Callable[[list[str]], list[str]]:
    """Replace input() with a scripted list of answers.

    Returns a function taking the answers; the returned list collects the
    prompts shown. EOFError is raised once the answers run out.
    """

    def _feed(answers: list[str]) -> list[str]:
        remaining = iter(answers)
        prompts: list[str] = []

        def _input(prompt: str = "") -> str:
            prompts.append(prompt)
            try:
                return next(remaining)
            except StopIteration:
                raise EOFError from None

        monkeypatch.setattr(builtins, "input", _input)
        return prompts

    return _feed
