"""
pyelgamal package initializer.

ElGamal over the prime-order subgroup of a safe-prime group, with its
multiplicative homomorphism:
    from pyelgamal import generate_key_pair, encrypt, decrypt, combine_many
"""
from .errors import (
    CipherTooLarge, ElGamalError, GenerationError, InvalidKey, InvalidParameters, MessageTooLarge,
)
from .Group.params import DomainParameters, generate_parameters
from .Group.utils import bytes_to_int, int_to_bytes
from .Homo.elgamal import (
    Cipher, PrivateKey, PublicKey, combine_many, combine_two, decrypt, encrypt,
    generate_key_pair, power, rerandomize,
)

__all__ = [
    "DomainParameters", "PublicKey", "PrivateKey", "Cipher",
    "generate_parameters", "generate_key_pair",
    "encrypt", "decrypt", "combine_two", "combine_many", "rerandomize", "power",
    "int_to_bytes", "bytes_to_int",
    "ElGamalError", "GenerationError", "InvalidParameters",
    "MessageTooLarge", "CipherTooLarge", "InvalidKey",
]
