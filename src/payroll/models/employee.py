"""Employee data models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class EvalScore(str, Enum):
    """Performance evaluation, best to worst."""

    SUPERB = "SUPERB"
    ABOVE_AVERAGE = "ABOVE_AVERAGE"
    AVERAGE = "AVERAGE"
    BELOW_AVERAGE = "BELOW_AVERAGE"
    UNSATISFACTORY = "UNSATISFACTORY"

    @classmethod
    def from_index(cls, index: int) -> EvalScore:
        """Map a zero-based menu index (0=SUPERB .. 4=UNSATISFACTORY) to a score.

        Raises:
            ValueError: If index is outside 0-4.
        """
        members = list(cls)
        if not 0 <= index < len(members):
            raise ValueError(f"Evaluation index must be 0-{len(members) - 1}, got {index}")
        return members[index]

    @property
    def display_name(self) -> str:
        return self.value


class NewEmployee(BaseModel):
    """Fields supplied when hiring. The registry assigns uid and evaluation."""

    first_name: str
    last_name: str
    age: int
    department: str = ""
    supervisor: str = ""
    position: str = ""
    salary: float = 0.0


class Employee(BaseModel):
    """A single employee record.

    Attribute assignment is not validated, so any age or salary is accepted.
    Only ``uid`` is fixed once the record exists.
    """

    uid: int = Field(ge=0, frozen=True, description="Registry-assigned identifier")
    first_name: str
    last_name: str
    age: int
    department: str = ""
    supervisor: str = ""
    position: str = ""
    salary: float = 0.0
    evaluation: EvalScore = Field(default=EvalScore.AVERAGE)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def give_raise(self, amount: float) -> None:
        self.salary += amount
