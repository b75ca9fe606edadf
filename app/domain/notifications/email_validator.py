"""
Email address validation.

A deliberately simple syntactic check: non-whitespace local part, "@",
non-whitespace domain containing a dot. Matching runs with a hard
timeout so adversarial input cannot stall a request; a timeout counts
as an invalid address.
"""

import logging
from typing import Any

import regex

logger = logging.getLogger(__name__)

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"
MATCH_TIMEOUT_SECONDS = 0.25

_EMAIL_RE = regex.compile(EMAIL_PATTERN, regex.IGNORECASE)


def is_valid_email(value: Any) -> bool:
    """Return True if value looks like an email address.

    Args:
        value: Candidate address. Anything that is not a non-blank
            string is rejected.

    Returns:
        False for None, blank input, a non-matching address, or when
        the match does not finish within MATCH_TIMEOUT_SECONDS.
    """
    if not isinstance(value, str) or not value.strip():
        return False

    try:
        return _EMAIL_RE.match(value, timeout=MATCH_TIMEOUT_SECONDS) is not None
    except TimeoutError:
        logger.warning("Email validation timed out; treating input as invalid")
        return False


def mask_email(value: str) -> str:
    """Mask the local part of an address for logging (j***@example.com)."""
    local, sep, domain = value.partition("@")
    if not sep:
        return "***"
    return f"{local[:1]}***@{domain}"
