"""
Purpose: Resolve the session credential through an ordered fallback chain.
Constraints: Only the interactive strategy has side effects; it is injected.
"""

# Imports
import logging
from typing import Callable, Iterable, Optional, Tuple

logger = logging.getLogger(__name__)

CredentialSource = Callable[[], Optional[str]]


def _present(value: Optional[str]) -> Optional[str]:
    if value is None or not value.strip():
        return None
    return value


def first_credential(sources: Iterable[Tuple[str, CredentialSource]]) -> Optional[str]:
    """Try each named source in order and stop at the first present value."""
    for name, source in sources:
        value = _present(source())
        if value is not None:
            logger.info(f"Using session credential from {name}")
            return value
    return None


# Public API
def resolve_credential(
    explicit: Optional[str] = None,
    env_value: Optional[str] = None,
    interactive: Optional[CredentialSource] = None,
) -> Optional[str]:
    """Explicit value, then environment value, then interactive login.

    ``interactive`` is only called when both other values are absent; pass
    None to fall back to anonymous access instead.
    """
    sources = [
        ("explicit argument", lambda: explicit),
        ("environment", lambda: env_value),
    ]
    if interactive is not None:
        sources.append(("interactive login", interactive))
    credential = first_credential(sources)
    if credential is None:
        logger.info("No session credential; fetching anonymously")
    return credential
