import pytest

from core import InputData, ProjectionConfig


@pytest.fixture
def example_input() -> InputData:
    return InputData(
        starting_cash=138_000,
        monthly_income=4_000,
        current_rent=2_000,
        expected_house_cost=700_000,
        years=30,
    )


@pytest.fixture
def basic_config() -> ProjectionConfig:
    return ProjectionConfig()


@pytest.fixture
def extended_config() -> ProjectionConfig:
    return ProjectionConfig.extended()
