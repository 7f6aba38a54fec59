import pytest
from click.testing import CliRunner

from kdcalc.log import configure_logger


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture(autouse=True)
def _reset_logger():
    # CLI invocations rebind the loguru sink to CliRunner's captured stderr
    yield
    configure_logger("INFO")
