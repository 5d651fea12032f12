"""
Password Hashing

Thin wrapper over Werkzeug's salted hashes. The salt and method are embedded
in the hash string, and ``check_password_hash`` compares digests with
``hmac.compare_digest``.
"""

from werkzeug.security import check_password_hash, generate_password_hash

DEFAULT_METHOD = 'scrypt'


def hash_password(password, method=DEFAULT_METHOD):
    if not isinstance(password, str) or not password:
        raise ValueError('password must be a non-empty string')
    return generate_password_hash(password, method=method)


def verify_password(password, password_hash):
    """Return True when ``password`` matches ``password_hash``.

    Never raises: wrong types, blank values and unparseable hashes all
    count as a mismatch.
    """
    if not isinstance(password, str) or not isinstance(password_hash, str):
        return False
    if not password or not password_hash:
        return False
    try:
        return check_password_hash(password_hash, password)
    except (ValueError, TypeError):
        return False
