import pytest
from deepequal.config import reset_default_config


@pytest.fixture(autouse=True)
def _reset_default_config():
    """Makes sure no test leaks process-wide defaults into the next one"""
    reset_default_config()
    yield
    reset_default_config()
