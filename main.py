# main.py
import argparse
import logging
import time
from functools import reduce

from pyelgamal import (
    combine_many, combine_two, decrypt, encrypt, generate_key_pair, power, rerandomize,
)

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger("ElGamalDemo")


def print_stage(title: str):
    logger.info("=" * 10 + f" {title} " + "=" * 10)


def log(role: str, msg: str, duration: float = None):
    if duration is None:
        logger.info(f"[{role}] {msg}")
    else:
        logger.info(f"[{role}] {msg} took {duration:.4f} s")


def elgamal_demo(bits: int = 128, certainty: int = 20) -> bool:
    """
    1) generate domain parameters and a key pair
    2) encrypt / decrypt with the public and private key
    3) multiplicative homomorphism over two and over many ciphertexts
    """
    print_stage("Key generation")
    start = time.time()
    priv = generate_key_pair(bits, certainty)
    pub = priv.public
    log("KeyGen", f"p has {pub.p.bit_length()} bits", time.time() - start)

    print_stage("Encrypt/Decrypt")
    m = 15005468827 % pub.p
    c = encrypt(pub, m)
    m_dec = decrypt(priv, c)
    log("Client", f"m = {m}, decrypted = {m_dec}")
    ok = m_dec == m

    c_r = rerandomize(pub, c)
    ok_r = decrypt(priv, c_r) == m and c_r != c
    log("Client", f"Rerandomize ok? {ok_r}")

    print_stage("Homomorphic product")
    m2 = 9876 % pub.p
    prod = decrypt(priv, combine_two(pub, c, encrypt(pub, m2)))
    ok_two = prod == (m * m2) % pub.p
    log("Server", f"combine_two ok? {ok_two}")

    values = [3, 5, 7, 11, 13]
    start = time.time()
    folded = combine_many(pub, [encrypt(pub, v) for v in values])
    expected = reduce(lambda a, b: (a * b) % pub.p, values, 1)
    ok_many = decrypt(priv, folded) == expected
    log("Server", f"combine_many over {len(values)} ciphertexts ok? {ok_many}", time.time() - start)

    ok_pow = decrypt(priv, power(pub, encrypt(pub, 2), 10)) == pow(2, 10, pub.p)
    log("Server", f"power ok? {ok_pow}")

    return ok and ok_r and ok_two and ok_many and ok_pow


def main():
    parser = argparse.ArgumentParser(description="ElGamal homomorphic encryption demo")
    parser.add_argument("--bits", type=int, default=128, help="bit size of the safe prime p")
    parser.add_argument("--certainty", type=int, default=20, help="Miller-Rabin rounds for p")
    args = parser.parse_args()

    if elgamal_demo(args.bits, args.certainty):
        logger.info("[OK] all checks passed")
    else:
        logger.error("[FAIL] demo check mismatch")
        raise SystemExit(1)


if __name__ == "__main__":
    main()
