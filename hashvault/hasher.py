"""PBKDF2 password hasher: HMAC-SHA512, 128-bit salt, 256-bit subkey, 100_000 iterations."""
from enum import Enum
from os import urandom
from typing import Callable, Protocol

from cryptography.exceptions import InternalError, UnsupportedAlgorithm

from .keys import PBKDF2_PARAMS, KeyDerivationPrf, derive_subkey, fixed_time_equals
from .record import HashRecord, decode_text, encode_record, encode_text, parse_record


class PasswordVerificationResult(Enum):
    FAILED = 0
    SUCCESS = 1
    SUCCESS_REHASH_NEEDED = 2


class EntropyError(RuntimeError):
    """The random source could not produce a salt; hashing must not go on."""


class PasswordHashing(Protocol):
    def hash_password(self, password: str) -> str: ...

    def verify_password(self, stored: str, candidate: str) -> PasswordVerificationResult: ...


class PasswordHasher:
    prf = PBKDF2_PARAMS["prf"]
    salt_size = PBKDF2_PARAMS["salt_size"]
    subkey_size = PBKDF2_PARAMS["subkey_size"]

    def __init__(self, iterations: int = PBKDF2_PARAMS["iterations"],
                 rng: Callable[[int], bytes] | None = None):
        if not 1 <= iterations <= 0xFFFFFFFF:
            raise ValueError("iterations must be a positive UInt32")
        self._iterations = iterations
        self._rng = rng if rng is not None else urandom

    @property
    def iterations(self) -> int:
        return self._iterations

    def hash_password(self, password: str) -> str:
        salt = self._new_salt()
        subkey = derive_subkey(password, salt, self.prf, self._iterations, self.subkey_size)
        record = HashRecord(prf=int(self.prf), iterations=self._iterations, salt=salt, subkey=subkey)
        return encode_text(encode_record(record))

    def verify_password(self, stored: str, candidate: str) -> PasswordVerificationResult:
        """Check ``candidate`` against ``stored``.

        Every malformed or mismatching input gives FAILED, so a corrupted
        record cannot be told apart from a wrong password. Never raises.
        """
        record = self._load(stored)
        if record is None:
            return PasswordVerificationResult.FAILED

        try:
            actual = derive_subkey(candidate, record.salt, record.prf,
                                   record.iterations, len(record.subkey))
        except (ValueError, TypeError, OverflowError, InternalError, UnsupportedAlgorithm):
            # unknown or disabled PRF, zero iterations, unencodable candidate, backend limits
            return PasswordVerificationResult.FAILED
        if not fixed_time_equals(actual, record.subkey):
            return PasswordVerificationResult.FAILED

        if self._is_stale(record):
            return PasswordVerificationResult.SUCCESS_REHASH_NEEDED
        return PasswordVerificationResult.SUCCESS

    def needs_rehash(self, stored: str) -> bool:
        """True when ``stored`` is unparseable or was made with weaker parameters."""
        record = self._load(stored)
        return record is None or self._is_stale(record)

    def _new_salt(self) -> bytes:
        try:
            salt = self._rng(self.salt_size)
        except Exception as exc:
            raise EntropyError("secure random source failed") from exc
        if not isinstance(salt, (bytes, bytearray)) or len(salt) != self.salt_size:
            raise EntropyError(f"random source did not return {self.salt_size} bytes")
        return bytes(salt)

    @staticmethod
    def _load(stored: str) -> HashRecord | None:
        blob = decode_text(stored)
        if not blob:
            return None
        return parse_record(blob)

    def _is_stale(self, record: HashRecord) -> bool:
        # If this hasher was configured with a higher iteration count, change the entry now.
        if record.iterations < self._iterations:
            return True
        # SHA1 and SHA256 records get upgraded to SHA512.
        return record.prf != KeyDerivationPrf.HMACSHA512
