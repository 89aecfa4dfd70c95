import pytest

@pytest.fixture(scope="session")
def market():
    # liquidity and expiry used by the original price tables
    return dict(L=100.0, T=1.0)

@pytest.fixture(scope="session")
def expiry_times():
    return [0.0, 0.25, 0.5, 0.75, 0.9, 0.99]

@pytest.fixture(scope="session")
def eth():
    # spot, target and 30-day vol from the GBM report
    return dict(current=2304.0, target=2500.0, minutes=1400.0, vol=0.54)
