import pytest

from geoproof.core.crypto.commitment import commit
from geoproof.core.geometry import make_point

# Porto (41.147360, -8.640357) and Lisbon (38.689598, -9.177078),
# projected to micrometers and shifted to non-negative coordinates.
PORTO = (84561568048516672, 40514348451309242, 0)
LISBON = (84561294895305754, 40514288800674023, 0)

KM = 1_000_000_000  # micrometers


@pytest.fixture(scope="session")
def porto():
    return make_point(*PORTO)


@pytest.fixture(scope="session")
def lisbon():
    return make_point(*LISBON)


@pytest.fixture(scope="session")
def porto_commitment(porto):
    return commit(porto)


@pytest.fixture(scope="session")
def lisbon_commitment(lisbon):
    return commit(lisbon)
