import hashlib

FINGERPRINT_SEPARATOR = "\x1f"


def content_fingerprint(title: str, body: str) -> str:
    """SHA256 of title and body, used as the determinism cache key."""
    payload = f"{title or ''}{FINGERPRINT_SEPARATOR}{body or ''}"
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()
