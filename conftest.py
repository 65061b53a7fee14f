"""Configures pytest further, and shares the seeds and key pair most tests run against."""
import pytest

from seedrsa.rsa import Keypair
from seedrsa.seed import Seed

SEED_ONE = Seed([10, 16, 51, 42, 123, 31, 212, 31, 233, 15, 9, 7, 41, 32, 4, 3, 144, 122, 1, 35, 1, 13, 55, 23, 1, 33,
                 1, 1, 1, 1, 2, 1])
TEST_SEED = Seed([1] * 32)


def pytest_addoption(parser):
    parser.addoption("--skip-slow", action="store_true", default=False, help="skip slower tests")
    parser.addoption("--run-extreme", action="store_true", default=False, help="run extreme value extremely slow tests")


def pytest_collection_modifyitems(config, items):
    skipdict = {}
    if config.getoption("--skip-slow"):
        skipdict["slow"] = pytest.mark.skip(reason="Slow test: needs no --skip-slow option")
    if not config.getoption("--run-extreme"):
        skipdict["extreme"] = pytest.mark.skip(reason="Extreme test: needs --run-extreme option")
    if not skipdict:
        return
    for item in items:
        for k, v in skipdict.items():
            if k in item.keywords:
                item.add_marker(v)


@pytest.fixture(scope="session")
def seed_one() -> Seed:
    return SEED_ONE


@pytest.fixture(scope="session")
def test_seed() -> Seed:
    return TEST_SEED


@pytest.fixture(scope="session")
def keypair() -> Keypair:
    """Key pair derived from the two fixed seeds. Generated once per session."""
    return Keypair.generate(SEED_ONE, TEST_SEED)
