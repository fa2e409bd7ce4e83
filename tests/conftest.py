"""Pytest fixtures for immo_roe tests."""

import os
import sys

import pytest

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from immo_roe.domain.models import SimulationInputs


@pytest.fixture
def golden_inputs_data():
    """Reference purchase as entered in the form (camelCase keys)."""
    return {
        "startYear": 2025,
        "buildingValue": 200000,
        "landValue": 80000,
        "grEStRate": 0.05,
        "maklerRate": 0.03,
        "grundbuchRate": 0.005,
        "notaryRate": 0.015,
        "fittingUp": 30000,
        "initialRepairs": 5000,
        "equity": 80000,
        "loanTermYears1": 30,
        "interestRate1": 0.035,
        "monthlyRent": 1200,
        "vacancyRate": 0.05,
        "rentGrowth": 0.01,
        "incomeTaxRate": 0.3,
        "afaModel": "Linear 2%",
        "investmentHorizonYears": 30,
        "saleMode": "hold",
    }


@pytest.fixture
def golden_inputs(golden_inputs_data):
    return SimulationInputs.model_validate(golden_inputs_data)


@pytest.fixture
def sale_inputs(golden_inputs_data):
    """Golden purchase with land value growth, sold in year 5."""
    return SimulationInputs.model_validate({
        **golden_inputs_data,
        "landGrowthRate": 0.10,
        "sellingCostRate": 0.03,
        "saleMode": "sell",
        "saleYear": 5,
        "investmentHorizonYears": 15,
    })
