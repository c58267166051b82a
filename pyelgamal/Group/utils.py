import secrets
from sympy import isprime

from pyelgamal.errors import GenerationError

# trial divisors checked before any Miller-Rabin round
_SMALL_PRIMES = (3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47)


def rand_below(n: int) -> int:
    """Uniform integer in [0, n) from the OS CSPRNG."""
    if n <= 0:
        raise ValueError("upper bound must be positive")
    try:
        return secrets.randbelow(n)
    except OSError as e:
        raise GenerationError("elgamal: randomness source failed") from e


def rand_range(low: int, high: int) -> int:
    """Uniform integer in [low, high)."""
    return low + rand_below(high - low)


def rand_odd_bits(bit_length: int) -> int:
    # top bit set so the result has exactly bit_length bits
    if bit_length < 2:
        raise ValueError("bit_length must be >= 2")
    try:
        r = secrets.randbits(bit_length)
    except OSError as e:
        raise GenerationError("elgamal: randomness source failed") from e
    return r | (1 << (bit_length - 1)) | 1


def random_prime(bit_length: int) -> int:
    """Odd prime of exactly bit_length bits."""
    while True:
        c = rand_odd_bits(bit_length)
        if isprime(c):
            return c


def modinv(a: int, mod: int) -> int:
    return pow(a, -1, mod)


def is_probable_prime(n: int, rounds: int) -> bool:
    """
    Miller-Rabin with `rounds` random bases.
    A composite n survives with probability at most 4^-rounds.
    """
    if n < 3 or n % 2 == 0:
        return n == 2
    for sp in _SMALL_PRIMES:
        if n % sp == 0:
            return n == sp
    if n < _SMALL_PRIMES[-1] ** 2:
        return True

    d, s = n - 1, 0
    while d % 2 == 0:
        d //= 2
        s += 1
    for _ in range(rounds):
        a = rand_range(2, n - 1)
        x = pow(a, d, n)
        if x == 1 or x == n - 1:
            continue
        for _ in range(s - 1):
            x = (x * x) % n
            if x == n - 1:
                break
        else:
            return False
    return True


def int_to_bytes(n: int) -> bytes:
    """Big-endian unsigned, minimal length. 0 encodes as b''."""
    if n < 0:
        raise ValueError("cannot encode a negative integer")
    return n.to_bytes((n.bit_length() + 7) // 8, "big")


def bytes_to_int(b: bytes) -> int:
    return int.from_bytes(b, "big")
