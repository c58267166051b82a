import pytest

from pyelgamal import DomainParameters, PrivateKey, PublicKey, generate_key_pair


@pytest.fixture
def small_params():
    # toy group: p = 23, q = 11, g = 4 has order 11
    return DomainParameters(p=23, q=11, g=4)


@pytest.fixture
def small_key(small_params):
    p, q, g = small_params
    x = 3
    return PrivateKey(public=PublicKey(g=g, p=p, y=pow(g, x, p), q=q), x=x)


@pytest.fixture(scope="session")
def key():
    return generate_key_pair(bit_size=64, certainty=20)


@pytest.fixture
def pub(key):
    return key.public
