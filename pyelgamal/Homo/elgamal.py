# elgamal.py
import logging
from typing import Iterable, NamedTuple, Optional, Tuple

from pyelgamal.errors import CipherTooLarge, InvalidKey, MessageTooLarge
from pyelgamal.Group.params import (
    DEFAULT_BIT_SIZE, DEFAULT_CERTAINTY, DomainParameters, generate_parameters,
)
from pyelgamal.Group.utils import bytes_to_int, int_to_bytes, modinv, rand_below, rand_range

logger = logging.getLogger(__name__)

Cipher = Tuple[int, int]  # (c1, c2)
RawCipher = Tuple[bytes, bytes]


def _check_cipher(c: Cipher, p: int) -> None:
    c1, c2 = c
    if not (0 <= c1 < p and 0 <= c2 < p):
        raise CipherTooLarge(p)


class PublicKey(NamedTuple):
    g: int
    p: int
    y: int
    q: Optional[int] = None  # subgroup order, only needed by rerandomize

    def encrypt(self, message: bytes) -> RawCipher:
        c1, c2 = encrypt(self, bytes_to_int(message))
        return int_to_bytes(c1), int_to_bytes(c2)

    def combine_two(self, c1: bytes, c2: bytes, c1_: bytes, c2_: bytes) -> RawCipher:
        C1, C2 = combine_two(
            self,
            (bytes_to_int(c1), bytes_to_int(c2)),
            (bytes_to_int(c1_), bytes_to_int(c2_)),
        )
        return int_to_bytes(C1), int_to_bytes(C2)

    def combine_many(self, ciphertexts: Iterable[RawCipher]) -> RawCipher:
        C1, C2 = combine_many(
            self, [(bytes_to_int(c1), bytes_to_int(c2)) for c1, c2 in ciphertexts]
        )
        return int_to_bytes(C1), int_to_bytes(C2)


class PrivateKey(NamedTuple):
    public: PublicKey
    x: int

    def __repr__(self) -> str:
        # x stays out of logs and tracebacks
        return f"PrivateKey(public={self.public!r}, x=<hidden>)"

    @property
    def p(self) -> int:
        return self.public.p

    @property
    def g(self) -> int:
        return self.public.g

    @property
    def y(self) -> int:
        return self.public.y

    @classmethod
    def from_parameters(cls, params: DomainParameters) -> "PrivateKey":
        """New key pair inside an existing group, x uniform in [1, q-1]."""
        p, q, g = params
        x = rand_range(1, q)
        y = pow(g, x, p)
        return cls(public=PublicKey(g=g, p=p, y=y, q=q), x=x)

    def decrypt(self, c1: bytes, c2: bytes) -> bytes:
        m = decrypt(self, (bytes_to_int(c1), bytes_to_int(c2)))
        return int_to_bytes(m)


def generate_key_pair(bit_size: int = DEFAULT_BIT_SIZE,
                      certainty: int = DEFAULT_CERTAINTY,
                      max_attempts: Optional[int] = None) -> PrivateKey:
    params = generate_parameters(bit_size, certainty, max_attempts)
    priv = PrivateKey.from_parameters(params)
    logger.debug("generated %d-bit key pair", priv.p.bit_length())
    return priv


def encrypt(pub: PublicKey, message: int, k: Optional[int] = None) -> Cipher:
    """
    ElGamal encryption of an integer 0 <= message < p.

    k is drawn fresh from [0, p) unless given. Supplying k is only meant for
    fixed test vectors: reusing k under one key leaks the plaintext ratio.
    """
    if message < 0:
        raise ValueError("message must be non-negative")
    if message >= pub.p:
        raise MessageTooLarge(pub.p)
    if k is None:
        k = rand_below(pub.p)
    elif not 0 <= k < pub.p:
        raise ValueError("k must be in [0, p)")

    c1 = pow(pub.g, k, pub.p)
    s = pow(pub.y, k, pub.p)
    c2 = (message * s) % pub.p
    return (c1, c2)


def decrypt(priv: PrivateKey, ciphertext: Cipher) -> int:
    p = priv.public.p
    _check_cipher(ciphertext, p)
    c1, c2 = ciphertext

    s = pow(c1, priv.x, p)
    try:
        s_inv = modinv(s, p)
    except ValueError as e:
        raise InvalidKey() from e
    return (s_inv * c2) % p


def combine_two(pub: PublicKey, a: Cipher, b: Cipher) -> Cipher:
    """E(m_a), E(m_b) -> E(m_a * m_b mod p)"""
    _check_cipher(a, pub.p)
    _check_cipher(b, pub.p)
    return ((a[0] * b[0]) % pub.p, (a[1] * b[1]) % pub.p)


def combine_many(pub: PublicKey, ciphertexts: Iterable[Cipher]) -> Cipher:
    """
    Product of all ciphertexts, decrypting to the product of their plaintexts.

    The fold starts at (1, 1), the encryption of 1 with k = 0. That seed is
    not a real ciphertext, so an empty input is rejected rather than returned.
    """
    ciphertexts = list(ciphertexts)
    if not ciphertexts:
        raise ValueError("combine_many needs at least one ciphertext")

    acc = (1, 1)
    for c in ciphertexts:
        acc = combine_two(pub, acc, c)
    logger.debug("combined %d ciphertexts", len(ciphertexts))
    return acc


def rerandomize(pub: PublicKey, c: Cipher, r: Optional[int] = None) -> Cipher:
    """Multiply in a fresh encryption of 1: same plaintext, unlinkable ciphertext."""
    _check_cipher(c, pub.p)
    bound = pub.q if pub.q is not None else pub.p
    if r is None:
        r = rand_below(bound)
    elif not 0 <= r < bound:
        raise ValueError("r must be in [0, q), or [0, p) when q is unknown")
    c1, c2 = c
    return ((c1 * pow(pub.g, r, pub.p)) % pub.p, (c2 * pow(pub.y, r, pub.p)) % pub.p)


def power(pub: PublicKey, c: Cipher, e: int) -> Cipher:
    """E(m) -> E(m^e mod p)"""
    if e < 1:
        # e = 0 would hand back the (1, 1) fold seed
        raise ValueError("exponent must be positive")
    _check_cipher(c, pub.p)
    c1, c2 = c
    return (pow(c1, e, pub.p), pow(c2, e, pub.p))
