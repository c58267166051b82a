"""
Exceptions raised by pyelgamal.

Every failure is raised to the caller, no operation returns a partial result.
"""


class ElGamalError(Exception):
    """Base class for all pyelgamal errors."""


class GenerationError(ElGamalError):
    """Randomness source failed or a parameter search ran out of attempts."""


class InvalidParameters(GenerationError):
    """Domain parameters violate p = 2q + 1 or the generator order."""


class MessageTooLarge(ElGamalError, ValueError):
    """Plaintext is not smaller than the modulus p."""

    def __init__(self, p: int = None):
        self.p = p
        super().__init__("elgamal: message is larger than public key size")


class CipherTooLarge(ElGamalError, ValueError):
    """A ciphertext component is not smaller than the modulus p."""

    def __init__(self, p: int = None):
        self.p = p
        super().__init__("elgamal: cipher is larger than public key size")


class InvalidKey(ElGamalError):
    """Shared secret has no inverse mod p: corrupted x or non-prime p."""

    def __init__(self, reason: str = "elgamal: invalid private key"):
        super().__init__(reason)
