"""HMAC-SHA256 signed sign-in tickets handed over by the external identity provider.

Once the provider has confirmed a member it signs a short-lived ticket with
the secret it shares with the portal. The portal verifies the ticket locally
and exchanges it for a session.

Token format: base64url(json_payload_bytes).base64url(hmac_sha256_signature)
"""

import base64
import binascii
import hashlib
import hmac
import json
import math
import time
from dataclasses import asdict, dataclass

import structlog

logger = structlog.get_logger()

_TOKEN_PARTS = 2  # base64url(payload).base64url(signature)

TICKET_TTL_SECONDS = 300  # 5 minutes
CLOCK_SKEW_SECONDS = 60


@dataclass
class SignInTicket:
    """Identity confirmed by the provider."""

    user_id: str
    email: str
    full_name: str
    issued_at: float
    expires_at: float


def create_signed_ticket(user_id: str, secret: str, *, email: str = "", full_name: str = "") -> str:
    """Create and sign a ticket, returning the signed token string."""
    now = time.time()
    ticket = SignInTicket(
        user_id=user_id,
        email=email,
        full_name=full_name,
        issued_at=now,
        expires_at=now + TICKET_TTL_SECONDS,
    )
    return sign_ticket(ticket, secret)


def sign_ticket(ticket: SignInTicket, secret: str) -> str:
    payload_bytes = json.dumps(asdict(ticket), sort_keys=True).encode()
    sig = hmac.new(secret.encode(), payload_bytes, hashlib.sha256).digest()
    payload_b64 = base64.urlsafe_b64encode(payload_bytes).decode()
    sig_b64 = base64.urlsafe_b64encode(sig).decode()
    return f"{payload_b64}.{sig_b64}"


def verify_ticket(token: str, secret: str) -> SignInTicket | None:
    """Verify HMAC signature and expiry. Returns the ticket or None on any failure."""
    parts = token.split(".")
    if len(parts) != _TOKEN_PARTS:
        return None

    try:
        payload_bytes = base64.urlsafe_b64decode(parts[0])
        provided_sig = base64.urlsafe_b64decode(parts[1])
    except (ValueError, binascii.Error):
        return None

    expected_sig = hmac.new(secret.encode(), payload_bytes, hashlib.sha256).digest()
    if not hmac.compare_digest(provided_sig, expected_sig):
        logger.debug("sign-in ticket signature mismatch")
        return None

    try:
        data = json.loads(payload_bytes)
        ticket = SignInTicket(**data)
    except (json.JSONDecodeError, TypeError):
        logger.debug("sign-in ticket malformed payload")
        return None

    if not isinstance(ticket.user_id, str) or not ticket.user_id:
        logger.debug("sign-in ticket without user id")
        return None
    if not _validate_ticket_timestamps(ticket):
        return None
    return ticket


def _is_finite_number(value: object) -> bool:
    if isinstance(value, bool):
        return False
    if not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def _validate_ticket_timestamps(ticket: SignInTicket) -> bool:
    """Reject non-finite, future-dated, over-long, or expired tickets."""
    if not _is_finite_number(ticket.issued_at) or not _is_finite_number(ticket.expires_at):
        logger.debug("sign-in ticket non-finite timestamp")
        return False

    now = time.time()
    if ticket.issued_at > now + CLOCK_SKEW_SECONDS:
        logger.debug("sign-in ticket issued in the future")
        return False
    if ticket.expires_at <= ticket.issued_at:
        logger.debug("sign-in ticket expires_at <= issued_at")
        return False
    if ticket.expires_at - ticket.issued_at > TICKET_TTL_SECONDS + CLOCK_SKEW_SECONDS:
        logger.debug("sign-in ticket lifetime too long")
        return False
    if now > ticket.expires_at:
        logger.debug("sign-in ticket expired")
        return False
    return True
