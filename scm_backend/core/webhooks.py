"""
Webhook signature rules.

Vendors sign the raw request body with HMAC-SHA256 over a shared secret.
Shopify sends the digest base64-encoded in X-Shopify-Hmac-Sha256; SAP,
the IoT platform and Power BI send it hex-encoded in X-Webhook-Signature.

Dependencies: None (pure domain layer)
System role: Inbound webhook authentication
"""

import base64
import hashlib
import hmac

SHOPIFY_SIGNATURE_HEADER = "X-Shopify-Hmac-Sha256"
SIGNATURE_HEADER = "X-Webhook-Signature"


def sign(secret: str, body: bytes, encoding: str = "hex") -> str:
    """HMAC-SHA256 of body, as hex or base64 text."""
    digest = hmac.new(secret.encode("utf-8"), body, hashlib.sha256).digest()
    if encoding == "base64":
        return base64.b64encode(digest).decode("ascii")
    return digest.hex()


def verify_signature(
    secret: str | None,
    body: bytes,
    signature: str | None,
    encoding: str = "hex",
) -> bool:
    """
    Check a webhook signature in constant time.

    An unset secret disables verification and always passes; a configured
    secret requires a matching signature.
    """
    if not secret:
        return True
    if not signature:
        return False
    return hmac.compare_digest(sign(secret, body, encoding), signature.strip())
