"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- Remote API payloads (configuration and calculation envelopes)
- Decoded domain records built from those payloads
"""

from typing import Any

import pytest

from src.domain.models import ConfigurationData, EOSBCalculationResult


@pytest.fixture
def config_payload() -> dict[str, Any]:
    """Configuration data as returned by GET /api/eosb/config."""
    return {
        "terminationTypes": [
            {"value": "resignation", "label": "Resignation", "labelAr": "استقالة"},
            {"value": "termination", "label": "Termination", "labelAr": "إنهاء خدمة"},
        ],
        "contractTypes": [
            {"value": False, "label": "Limited Contract", "labelAr": "عقد محدد"},
            {"value": True, "label": "Unlimited Contract", "labelAr": "عقد غير محدد"},
        ],
        "calculationRules": {
            "minimumServiceDays": 365,
            "firstFiveYearsRate": 21,
            "additionalYearsRate": 30,
            "resignationPenalty": {
                "lessThanOneYear": 0,
                "lessThanThreeYears": 0.333,
                "lessThanFiveYears": 0.667,
                "fiveYearsOrMore": 1,
            },
        },
    }


@pytest.fixture
def result_payload() -> dict[str, Any]:
    """Eligible calculation result as returned by POST /api/eosb/calculate."""
    return {
        "totalServiceYears": 7,
        "totalServiceMonths": 3,
        "totalServiceDays": 12,
        "basicSalaryAmount": 10000,
        "totalSalary": 15000,
        "eligibleYears": 7.28,
        "gratuityAmount": 59383.33,
        "breakdown": {
            "firstFiveYears": {"years": 5, "rate": 21, "amount": 35000},
            "additionalYears": {"years": 2.28, "rate": 30, "amount": 24383.33},
        },
        "isEligible": True,
        "reason": None,
    }


@pytest.fixture
def configuration(config_payload: dict[str, Any]) -> ConfigurationData:
    return ConfigurationData.model_validate(config_payload)


@pytest.fixture
def eligible_result(result_payload: dict[str, Any]) -> EOSBCalculationResult:
    return EOSBCalculationResult.model_validate(result_payload)
