import hmac
import hashlib
import bcrypt


# Prefixes produced by bcrypt implementations
BCRYPT_PREFIXES = ("$2a$", "$2b$", "$2y$")


def is_bcrypt_hash(value: str) -> bool:
    """Check whether a stored credential is a bcrypt hash rather than plaintext."""
    return value.startswith(BCRYPT_PREFIXES)


def _prepare_secret_for_bcrypt(secret: str) -> bytes:
    """
    Prepare a credential for bcrypt hashing.
    Bcrypt has a 72 byte limit, so longer secrets are hashed with SHA256 first.
    """
    secret_bytes = secret.encode("utf-8")
    if len(secret_bytes) > 72:
        return hashlib.sha256(secret_bytes).hexdigest().encode("utf-8")
    return secret_bytes


def hash_credential(secret: str) -> str:
    """
    Hash an account credential using bcrypt.

    The API only verifies credentials; this is the helper for seeding or
    migrating stored `clave` values to bcrypt.

    Args:
        secret: The plain text credential

    Returns:
        The bcrypt hash as a string
    """
    salt = bcrypt.gensalt(rounds=12)
    hashed = bcrypt.hashpw(_prepare_secret_for_bcrypt(secret), salt)
    return hashed.decode("utf-8")


def constant_time_compare(a: str, b: str) -> bool:
    """
    Perform a constant-time string comparison to prevent timing attacks.

    Args:
        a: First string to compare
        b: Second string to compare

    Returns:
        True if strings are equal, False otherwise
    """
    return hmac.compare_digest(a.encode("utf-8"), b.encode("utf-8"))


def verify_credential(plain: str, stored: str | None) -> bool:
    """
    Verify a submitted credential against the stored one.

    Stored bcrypt hashes are checked with bcrypt; any other stored value is
    a legacy plaintext secret and is compared verbatim.

    Args:
        plain: The credential submitted at login
        stored: The value from the account row

    Returns:
        True if the credential matches, False otherwise
    """
    if not stored:
        return False

    if is_bcrypt_hash(stored):
        try:
            return bcrypt.checkpw(
                _prepare_secret_for_bcrypt(plain), stored.encode("utf-8")
            )
        except (ValueError, TypeError):
            return False

    return constant_time_compare(plain, stored)
