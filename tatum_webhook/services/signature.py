"""HMAC-SHA512 signatures for Tatum webhook notifications.

Tatum signs every notification body with the subscription's HMAC secret and
sends the Base64 digest in the ``x-payload-hash`` header. The digest covers the
raw request bytes, so it must be computed before the body is parsed.
"""

import base64
import hashlib
import hmac

SIGNATURE_HEADER = "x-payload-hash"


def compute_signature(secret: str, body: bytes) -> str:
    digest = hmac.new(secret.encode("utf-8"), body, hashlib.sha512).digest()
    return base64.b64encode(digest).decode("ascii")


def verify_signature(secret: str, body: bytes, signature: str) -> bool:
    """Return True if ``signature`` is the Base64 HMAC-SHA512 of ``body``.

    Uses a constant-time comparison on the encoded bytes.
    """
    expected = compute_signature(secret, body).encode("ascii")
    return hmac.compare_digest(expected, signature.encode("utf-8"))
