"""Retry policy for transient storage failures."""

import httpx
from tenacity import (
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

# The Supabase client talks to PostgREST over httpx; transport errors are
# connection-level and safe to retry for idempotent writes.
TRANSIENT_STORAGE_ERRORS = (httpx.TransportError,)


def storage_retry(attempts: int = 3) -> Retrying:
    """Return a bounded retry policy for idempotent storage calls."""
    return Retrying(
        reraise=True,
        stop=stop_after_attempt(attempts),
        wait=wait_exponential(multiplier=0.2, min=0.2, max=2),
        retry=retry_if_exception_type(TRANSIENT_STORAGE_ERRORS),
    )
