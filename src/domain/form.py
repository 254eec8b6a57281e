"""
Calculator form - Raw user input and client-side validation.

The form keeps salary as the text the user typed and the selections as
configured options. Validation is limited to field presence, a positive
salary and an ordered date range; everything else is the remote
service's job.
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import date

from .exceptions import (
    InvalidBasicSalary,
    InvalidDateRange,
    MissingContractType,
    MissingTerminationType,
)
from .models import ContractOption, DropdownOption, EmployeeData


def one_year_before(day: date) -> date:
    """Same calendar day one year earlier (Feb 29 falls back to Feb 28)."""
    try:
        return day.replace(year=day.year - 1)
    except ValueError:
        return day.replace(year=day.year - 1, day=28)


def parse_salary(text: str) -> float | None:
    """
    Parse the salary field.

    Returns:
        Salary as float, or None when the text is not a finite positive number
    """
    try:
        value = float(text.strip())
    except ValueError:
        return None
    if not math.isfinite(value) or value <= 0:
        return None
    return value


@dataclass
class CalculatorForm:
    """Employment data entered by the user."""

    basic_salary: str = ""
    termination_type: DropdownOption | None = None
    contract_type: ContractOption | None = None
    joining_date: date = field(default_factory=lambda: one_year_before(date.today()))
    last_working_day: date = field(default_factory=date.today)

    @property
    def is_valid(self) -> bool:
        """True iff the form can be submitted."""
        return (
            parse_salary(self.basic_salary) is not None
            and self.termination_type is not None
            and self.contract_type is not None
            and self.joining_date <= self.last_working_day
        )

    def to_employee_data(self) -> EmployeeData:
        """
        Build the calculation request from the form.

        Checks run in field order so the first problem is reported.

        Raises:
            InvalidBasicSalary: Salary missing, not numeric or not positive
            MissingTerminationType: No termination type selected
            MissingContractType: No contract type selected
            InvalidDateRange: Joining date after last working day
        """
        salary = parse_salary(self.basic_salary)
        if salary is None:
            raise InvalidBasicSalary()
        if self.termination_type is None:
            raise MissingTerminationType()
        if self.contract_type is None:
            raise MissingContractType()
        if self.joining_date > self.last_working_day:
            raise InvalidDateRange()

        return EmployeeData(
            basic_salary=salary,
            termination_type=self.termination_type.value,
            is_unlimited_contract=self.contract_type.value,
            joining_date=self.joining_date,
            last_working_day=self.last_working_day,
        )

    def select_termination_type(
        self, value: str | None, options: Sequence[DropdownOption]
    ) -> DropdownOption | None:
        """Select the configured termination option matching value, or clear it."""
        self.termination_type = next((o for o in options if o.value == value), None)
        return self.termination_type

    def select_contract_type(
        self, value: bool | None, options: Sequence[ContractOption]
    ) -> ContractOption | None:
        """Select the configured contract option matching value, or clear it."""
        self.contract_type = (
            None if value is None else next((o for o in options if o.value is value), None)
        )
        return self.contract_type

    def reset(self, today: date | None = None) -> None:
        """Restore every field to its default."""
        today = today or date.today()
        self.basic_salary = ""
        self.termination_type = None
        self.contract_type = None
        self.joining_date = one_year_before(today)
        self.last_working_day = today
