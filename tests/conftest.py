import copy
import json
from pathlib import Path
from typing import Any

import pytest

from weatherkit.forecasts import Forecast

SAMPLE_PATH = Path(__file__).parent / "data" / "weatherkit_sample.json"


@pytest.fixture
def sample_payload() -> dict[str, Any]:
    return json.loads(SAMPLE_PATH.read_text())


@pytest.fixture
def hour_data(sample_payload: dict[str, Any]) -> dict[str, Any]:
    """First hourly entry; a deep copy so tests can mutate it."""
    return copy.deepcopy(sample_payload["forecastHourly"]["hours"][0])


@pytest.fixture
def forecast(sample_payload: dict[str, Any]) -> Forecast:
    return Forecast.from_json(sample_payload, "Europe/Copenhagen")
