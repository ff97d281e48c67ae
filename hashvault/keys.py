from enum import IntEnum

from cryptography.hazmat.primitives import constant_time, hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC


class KeyDerivationPrf(IntEnum):
    HMACSHA1 = 0
    HMACSHA256 = 1
    HMACSHA512 = 2


_HASHES = {
    KeyDerivationPrf.HMACSHA1: hashes.SHA1,
    KeyDerivationPrf.HMACSHA256: hashes.SHA256,
    KeyDerivationPrf.HMACSHA512: hashes.SHA512,
}

PBKDF2_PARAMS = dict(prf=KeyDerivationPrf.HMACSHA512, iterations=100_000,
                     salt_size=128 // 8, subkey_size=256 // 8)


def derive_subkey(password: str, salt: bytes, prf: int, iterations: int, length: int) -> bytes:
    """PBKDF2 over the UTF-8 password with the HMAC picked by the wire PRF id."""
    if iterations < 1 or length < 1:
        raise ValueError("iterations and length must be positive")
    try:
        algorithm = _HASHES[KeyDerivationPrf(prf)]()
    except ValueError:
        raise ValueError(f"unsupported PRF id: {prf}") from None
    kdf = PBKDF2HMAC(algorithm=algorithm, length=length, salt=salt, iterations=iterations)
    return kdf.derive(password.encode("utf-8"))


def fixed_time_equals(a: bytes, b: bytes) -> bool:
    # bytes_eq only leaks the lengths, never the position of the first mismatch
    return constant_time.bytes_eq(a, b)
