import pytest

from limbint import bigint as bigintmodule
from limbint.config.bigintoption import get_bigint_config

try:
    from hypothesis import settings
except ImportError:
    pass
else:
    settings.register_profile('default', deadline=None)
    settings.load_profile('default')


def pytest_addoption(parser):
    group = parser.getgroup("limbint options")
    group.addoption('--karatsuba', action="store_true", dest="karatsuba",
           default=False,
           help="run the tests with Karatsuba multiplication and a small "
                "cutoff")
    group.addoption('--check-canonical', action="store_true",
           dest="check_canonical", default=False,
           help="check the canonical form after every normalization")


@pytest.fixture(autouse=True)
def bigint_config(request):
    """Give every test a fresh engine configuration."""
    option = request.config.option
    config = get_bigint_config()
    if option.karatsuba:
        config.mul.karatsuba = True
        config.mul.karatsuba_cutoff = 2
    if option.check_canonical:
        config.debug.check_canonical = True
    old = bigintmodule.set_config(config)
    yield config
    bigintmodule.set_config(old)
