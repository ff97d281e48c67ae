"""Command-line helper: ``python -m hashvault hash`` / ``python -m hashvault verify STORED``."""
import argparse
import getpass
import logging
import sys

from .config import load_settings
from .hasher import PasswordHasher, PasswordVerificationResult

logger = logging.getLogger("hashvault")

RESULT_LABELS = {
    PasswordVerificationResult.SUCCESS: "Success",
    PasswordVerificationResult.SUCCESS_REHASH_NEEDED: "SuccessRehashNeeded",
    PasswordVerificationResult.FAILED: "Failed",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="hashvault", description=__doc__)
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    parser.add_argument("--iterations", type=int, default=None,
                        help="target PBKDF2 iteration count (default: HASHVAULT_ITERATIONS or 100000)")
    sub = parser.add_subparsers(dest="command", required=True)

    p_hash = sub.add_parser("hash", help="hash a password")
    p_hash.add_argument("--password", help="password to hash (prompted if omitted)")

    p_verify = sub.add_parser("verify", help="verify a password against a stored hash")
    p_verify.add_argument("stored", help="base64 hash produced by 'hash'")
    p_verify.add_argument("--password", help="candidate password (prompted if omitted)")
    return parser


def _password(args) -> str:
    if args.password is not None:
        return args.password
    return getpass.getpass("Password: ")


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    iterations = args.iterations if args.iterations is not None else load_settings().iterations
    try:
        hasher = PasswordHasher(iterations=iterations)
    except ValueError as exc:
        logger.error("%s", exc)
        return 2
    logger.debug("using %d PBKDF2 iterations", hasher.iterations)

    if args.command == "hash":
        print(hasher.hash_password(_password(args)))
        return 0

    result = hasher.verify_password(args.stored, _password(args))
    if result is PasswordVerificationResult.SUCCESS_REHASH_NEEDED:
        logger.info("stored hash uses weaker parameters than %d x HMAC-SHA512; rehash it",
                    hasher.iterations)
    print(RESULT_LABELS[result])
    return 1 if result is PasswordVerificationResult.FAILED else 0


if __name__ == "__main__":
    sys.exit(main())
