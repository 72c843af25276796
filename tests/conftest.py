"""Shared pytest fixtures for Water Quality Index Monitor tests."""

import pytest


@pytest.fixture
def sample_station_1_params() -> dict[str, float]:
    """Readings for the bundled "Sample Station 1" (Ganga River)."""
    return {
        "do": 7.2,
        "ph": 7.8,
        "bod": 2.5,
        "nitrates": 15,
        "conductivity": 350,
        "coliform": 500,
        "temperature": 25,
        "turbidity": 10,
        "phosphates": 0.5,
    }


@pytest.fixture
def pristine_params() -> dict[str, float]:
    """Readings close to ideal for every parameter."""
    return {
        "do": 10.0,
        "ph": 7.5,
        "bod": 0.0,
        "nitrates": 0.0,
        "conductivity": 0.0,
        "coliform": 1.0,
        "temperature": 20.0,
        "turbidity": 0.0,
        "phosphates": 0.0,
    }


@pytest.fixture
def station_csv() -> str:
    """Comma-delimited station CSV with two stations."""
    return (
        "station,location,state,latitude,longitude,do,ph,bod,nitrates,coliform,"
        "conductivity,temperature,turbidity,phosphates\n"
        "Ganga at Haridwar,Ganga River,Uttarakhand,29.9457,78.1642,7.2,7.8,2.5,15,500,350,25,10,0.5\n"
        "Yamuna at Delhi,Yamuna River,Delhi,28.6139,77.209,6.8,7.6,2.8,18,600,380,26,12,0.6\n"
    )


@pytest.fixture
def minimal_csv() -> str:
    """Semicolon-delimited CSV with only the required columns, aliased."""
    return "Station_Name;Dissolved_Oxygen;pH_Value\nTawi at Jammu;7.2;7.8\n"


@pytest.fixture
def yearly_wqi_values() -> list[float]:
    """Yearly WQI series 2000-2022 without outliers."""
    return [
        68.3, 67.9, 69.2, 66.5, 65.8, 64.5, 63.9, 62.5, 61.8, 60.2, 59.5, 58.8,
        57.5, 58.8, 60.1, 61.5, 62.2, 63.8, 64.5, 65.2, 66.5, 67.2, 68.5,
    ]


@pytest.fixture
def yearly_labels() -> list[str]:
    """Year labels matching ``yearly_wqi_values``."""
    return [str(year) for year in range(2000, 2023)]
