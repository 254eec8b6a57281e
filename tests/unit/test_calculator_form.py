"""
Unit tests for CalculatorForm.

Tests client-side validation:
- Form validity (salary > 0, both selections, ordered dates)
- Employee data construction and error precedence
- Option selection and reset
"""

from datetime import date

import pytest

from src.domain.exceptions import (
    InvalidBasicSalary,
    InvalidDateRange,
    MissingContractType,
    MissingTerminationType,
)
from src.domain.form import CalculatorForm, one_year_before, parse_salary
from src.domain.models import ConfigurationData


@pytest.fixture
def filled_form(configuration: ConfigurationData) -> CalculatorForm:
    """Form with every field valid."""
    return CalculatorForm(
        basic_salary="10000",
        termination_type=configuration.termination_types[0],
        contract_type=configuration.contract_types[1],
        joining_date=date(2018, 1, 15),
        last_working_day=date(2025, 4, 27),
    )


class TestParseSalary:
    """Tests for salary field parsing."""

    @pytest.mark.parametrize("text,expected", [("10000", 10000.0), ("2500.50", 2500.5), (" 42 ", 42.0)])
    def test_positive_numbers_parse(self, text: str, expected: float) -> None:
        assert parse_salary(text) == expected

    @pytest.mark.parametrize("text", ["", "abc", "0", "-100", "nan", "inf"])
    def test_invalid_values_rejected(self, text: str) -> None:
        assert parse_salary(text) is None


class TestFormValidity:
    """Tests for is_valid."""

    def test_complete_form_is_valid(self, filled_form: CalculatorForm) -> None:
        assert filled_form.is_valid is True

    def test_zero_salary_is_invalid(self, filled_form: CalculatorForm) -> None:
        filled_form.basic_salary = "0"
        assert filled_form.is_valid is False

    def test_non_numeric_salary_is_invalid(self, filled_form: CalculatorForm) -> None:
        filled_form.basic_salary = "ten thousand"
        assert filled_form.is_valid is False

    def test_missing_termination_type_is_invalid(self, filled_form: CalculatorForm) -> None:
        filled_form.termination_type = None
        assert filled_form.is_valid is False

    def test_missing_contract_type_is_invalid(self, filled_form: CalculatorForm) -> None:
        filled_form.contract_type = None
        assert filled_form.is_valid is False

    def test_same_day_dates_are_valid(self, filled_form: CalculatorForm) -> None:
        """Joining date equal to last working day is allowed."""
        filled_form.joining_date = filled_form.last_working_day
        assert filled_form.is_valid is True

    def test_reversed_dates_are_invalid(self, filled_form: CalculatorForm) -> None:
        filled_form.joining_date = date(2025, 5, 1)
        assert filled_form.is_valid is False

    def test_default_form_is_invalid(self) -> None:
        """A fresh form has no salary and no selections."""
        assert CalculatorForm().is_valid is False


class TestToEmployeeData:
    """Tests for building the calculation request."""

    def test_builds_employee_data(self, filled_form: CalculatorForm) -> None:
        employee = filled_form.to_employee_data()

        assert employee.to_wire() == {
            "basicSalary": 10000.0,
            "terminationType": "resignation",
            "isUnlimitedContract": True,
            "joiningDate": "2018-01-15",
            "lastWorkingDay": "2025-04-27",
        }

    def test_invalid_salary_raises(self, filled_form: CalculatorForm) -> None:
        filled_form.basic_salary = "-5"
        with pytest.raises(InvalidBasicSalary) as exc_info:
            filled_form.to_employee_data()
        assert str(exc_info.value) == "Please enter a valid basic salary amount"

    def test_missing_termination_type_raises(self, filled_form: CalculatorForm) -> None:
        filled_form.termination_type = None
        with pytest.raises(MissingTerminationType):
            filled_form.to_employee_data()

    def test_missing_contract_type_raises(self, filled_form: CalculatorForm) -> None:
        filled_form.contract_type = None
        with pytest.raises(MissingContractType):
            filled_form.to_employee_data()

    def test_reversed_dates_raise(self, filled_form: CalculatorForm) -> None:
        filled_form.last_working_day = date(2017, 12, 31)
        with pytest.raises(InvalidDateRange) as exc_info:
            filled_form.to_employee_data()
        assert exc_info.value.message == "Last working day must be after joining date"

    def test_salary_checked_before_selections(self) -> None:
        """The first failing field is the one reported."""
        form = CalculatorForm(basic_salary="")
        with pytest.raises(InvalidBasicSalary):
            form.to_employee_data()


class TestOptionSelection:
    """Tests for resolving wire values against configured options."""

    def test_select_known_termination_type(
        self, configuration: ConfigurationData
    ) -> None:
        form = CalculatorForm()
        option = form.select_termination_type("termination", configuration.termination_types)
        assert option is not None
        assert option.label == "Termination"
        assert form.termination_type is option

    def test_unknown_termination_type_clears_selection(
        self, filled_form: CalculatorForm, configuration: ConfigurationData
    ) -> None:
        assert filled_form.select_termination_type("retired", configuration.termination_types) is None
        assert filled_form.termination_type is None

    def test_select_contract_type_by_bool(self, configuration: ConfigurationData) -> None:
        form = CalculatorForm()
        option = form.select_contract_type(False, configuration.contract_types)
        assert option is not None
        assert option.label == "Limited Contract"

    def test_none_contract_type_clears_selection(
        self, filled_form: CalculatorForm, configuration: ConfigurationData
    ) -> None:
        filled_form.select_contract_type(None, configuration.contract_types)
        assert filled_form.contract_type is None


class TestReset:
    """Tests for form reset."""

    def test_reset_restores_defaults(self, filled_form: CalculatorForm) -> None:
        filled_form.reset(today=date(2025, 6, 30))

        assert filled_form.basic_salary == ""
        assert filled_form.termination_type is None
        assert filled_form.contract_type is None
        assert filled_form.joining_date == date(2024, 6, 30)
        assert filled_form.last_working_day == date(2025, 6, 30)

    def test_one_year_before_leap_day(self) -> None:
        """Feb 29 falls back to Feb 28 of the previous year."""
        assert one_year_before(date(2024, 2, 29)) == date(2023, 2, 28)
