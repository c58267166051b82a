# pyelgamal/Group/params.py
import logging
from typing import NamedTuple, Optional
from sympy import isprime

from pyelgamal.errors import GenerationError, InvalidParameters
from pyelgamal.Group.utils import is_probable_prime, random_prime, rand_range

logger = logging.getLogger(__name__)

DEFAULT_BIT_SIZE = 512
DEFAULT_CERTAINTY = 20


class DomainParameters(NamedTuple):
    """Safe prime p = 2q + 1 and a generator g of the order-q subgroup."""
    p: int
    q: int
    g: int

    def validate(self, certainty: int = DEFAULT_CERTAINTY) -> "DomainParameters":
        p, q, g = self
        if p != 2 * q + 1:
            raise InvalidParameters("p != 2q + 1")
        if not isprime(q):
            raise InvalidParameters("q is not prime")
        if not is_probable_prime(p, certainty):
            raise InvalidParameters("p is not prime")
        if not 1 < g < p:
            raise InvalidParameters("g out of range")
        if pow(g, 2, p) == 1 or pow(g, q, p) != 1:
            raise InvalidParameters("g does not generate the order-q subgroup")
        return self


def _pick_generator(p: int, q: int, max_attempts: Optional[int]) -> int:
    attempts = 0
    while max_attempts is None or attempts < max_attempts:
        attempts += 1
        g = rand_range(2, p)
        if pow(g, 2, p) == 1:
            continue
        if pow(g, q, p) == 1:
            logger.debug("generator found after %d attempts", attempts)
            return g
    raise GenerationError(f"elgamal: no generator found in {max_attempts} attempts")


def generate_parameters(bit_size: int = DEFAULT_BIT_SIZE,
                        certainty: int = DEFAULT_CERTAINTY,
                        max_attempts: Optional[int] = None) -> DomainParameters:
    """
    Search for a safe prime p of bit_size bits and a generator g with
    multiplicative order q = (p - 1) / 2.

    p passes `certainty` Miller-Rabin rounds (false positive <= 4^-certainty).
    max_attempts caps the number of prime q candidates tried, and separately
    the number of generator candidates; None searches until found.
    """
    if bit_size < 3:
        raise ValueError("bit_size must be >= 3, the smallest usable safe prime is 7")
    if certainty < 1:
        raise ValueError("certainty must be >= 1")
    if max_attempts is not None and max_attempts < 1:
        raise ValueError("max_attempts must be >= 1")

    attempts = 0
    while max_attempts is None or attempts < max_attempts:
        attempts += 1
        q = random_prime(bit_size - 1)
        p = 2 * q + 1
        if not (is_probable_prime(p, certainty) and isprime(p)):
            continue
        logger.debug("safe prime of %d bits found after %d candidates", bit_size, attempts)
        g = _pick_generator(p, q, max_attempts)
        return DomainParameters(p=p, q=q, g=g)

    raise GenerationError(f"elgamal: can't emit <p,q,g> in {max_attempts} attempts")
