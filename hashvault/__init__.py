"""Password hashing and verification (PBKDF2-HMAC-SHA512, self-describing base64 records)."""
from .hasher import EntropyError, PasswordHasher, PasswordHashing, PasswordVerificationResult
from .login import hash_password, verify_password
from .config import HasherSettings, load_settings
