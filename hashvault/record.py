"""Binary layout of a stored password hash.

Format: { 0x01, prf (UInt32), iter count (UInt32), salt length (UInt32), salt, subkey }
All UInt32s are stored big-endian. The text form is standard base64 of those bytes.
"""
import base64
from dataclasses import dataclass

FORMAT_MARKER = 0x01
HEADER_SIZE = 13  # marker + three UInt32s
MIN_SALT_SIZE = 128 // 8
MIN_SUBKEY_SIZE = 128 // 8


@dataclass(frozen=True)
class HashRecord:
    prf: int
    iterations: int
    salt: bytes
    subkey: bytes


def write_network_byte_order(buffer: bytearray, offset: int, value: int) -> None:
    buffer[offset + 0] = (value >> 24) & 0xFF
    buffer[offset + 1] = (value >> 16) & 0xFF
    buffer[offset + 2] = (value >> 8) & 0xFF
    buffer[offset + 3] = value & 0xFF


def read_network_byte_order(buffer: bytes, offset: int) -> int:
    return ((buffer[offset + 0] << 24)
            | (buffer[offset + 1] << 16)
            | (buffer[offset + 2] << 8)
            | buffer[offset + 3])


def encode_record(record: HashRecord) -> bytes:
    """Serialize a record; header fields must fit in an unsigned 32-bit int."""
    for name, value in (("prf", record.prf), ("iterations", record.iterations),
                        ("salt length", len(record.salt))):
        if not 0 <= value <= 0xFFFFFFFF:
            raise ValueError(f"{name} does not fit in UInt32: {value}")
    out = bytearray(HEADER_SIZE + len(record.salt) + len(record.subkey))
    out[0] = FORMAT_MARKER
    write_network_byte_order(out, 1, record.prf)
    write_network_byte_order(out, 5, record.iterations)
    write_network_byte_order(out, 9, len(record.salt))
    out[HEADER_SIZE:HEADER_SIZE + len(record.salt)] = record.salt
    out[HEADER_SIZE + len(record.salt):] = record.subkey
    return bytes(out)


def parse_record(blob: bytes) -> HashRecord | None:
    """Parse a payload, or return None if it is not a usable version 1 record.

    Never raises: every structural problem (short header, wrong marker,
    undersized or overrunning salt, undersized subkey) gives None.
    """
    if len(blob) < HEADER_SIZE or blob[0] != FORMAT_MARKER:
        return None
    prf = read_network_byte_order(blob, 1)
    iterations = read_network_byte_order(blob, 5)
    salt_length = read_network_byte_order(blob, 9)

    # Read the salt: must be >= 128 bits
    if salt_length < MIN_SALT_SIZE or HEADER_SIZE + salt_length > len(blob):
        return None
    salt = bytes(blob[HEADER_SIZE:HEADER_SIZE + salt_length])

    # Read the subkey (the rest of the payload): must be >= 128 bits
    subkey = bytes(blob[HEADER_SIZE + salt_length:])
    if len(subkey) < MIN_SUBKEY_SIZE:
        return None
    return HashRecord(prf=prf, iterations=iterations, salt=salt, subkey=subkey)


def encode_text(blob: bytes) -> str:
    return base64.b64encode(blob).decode("ascii")


def decode_text(text: str) -> bytes | None:
    try:
        return base64.b64decode(text, validate=True)
    except (ValueError, TypeError):  # binascii.Error is a ValueError
        return None
