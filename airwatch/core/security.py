import re

from passlib.context import CryptContext

# rows written before hashing was introduced hold the cleartext password;
# they still verify and are rehashed on the next successful login
pwd_context = CryptContext(schemes=["argon2", "plaintext"], deprecated=["plaintext"])

PASSWORD_POLICY_MESSAGE = (
    "Password must be at least 8 characters long and contain "
    "at least one uppercase letter and one number"
)

_PASSWORD_RE = re.compile(r"(?=.*[A-Z])(?=.*[0-9]).{8,}")


def is_strong_password(password: str) -> bool:
    return _PASSWORD_RE.fullmatch(password or "") is not None


def hash_password(password: str):
    return pwd_context.hash(password)


def verify_and_update_password(password: str, hashed: str):
    """Return ``(verified, new_hash)``; ``new_hash`` is None unless the stored value needs replacing."""
    return pwd_context.verify_and_update(password, hashed)
