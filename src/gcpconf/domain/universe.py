"""Cross-check the declared universe domain against the credential domain."""

from __future__ import annotations

from .errors import UniverseDomainMismatchError

DEFAULT_UNIVERSE_DOMAIN = "googleapis.com"


def _is_default(domain: str) -> bool:
    return domain in ("", DEFAULT_UNIVERSE_DOMAIN)


def validate_universe_domain(declared: str | None, implied: str) -> str:
    """Return the resolved universe domain, ``""`` meaning the default.

    Args:
        declared: The ``universe_domain`` setting, or None when unset.
        implied: Domain implied by the loaded credentials; ``""`` is the default.

    Raises:
        UniverseDomainMismatchError: When the two disagree.

    Examples:
        >>> validate_universe_domain("example.com", "example.com")
        'example.com'
        >>> validate_universe_domain("googleapis.com", "")
        ''
        >>> validate_universe_domain(None, "")
        ''
        >>> validate_universe_domain(None, "example.com")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        UniverseDomainMismatchError: ...
    """
    if declared is not None:
        if implied == "":
            if declared == DEFAULT_UNIVERSE_DOMAIN:
                return ""
            raise UniverseDomainMismatchError(
                f"universe domain {declared!r} was declared but the credentials imply the default "
                f"domain {DEFAULT_UNIVERSE_DOMAIN!r}; set universe_domain to match the credentials",
                declared=declared,
                implied=implied,
            )
        if declared != implied:
            raise UniverseDomainMismatchError(
                f"universe domain mismatch: declared {declared!r} does not match "
                f"credential universe domain {implied!r}",
                declared=declared,
                implied=implied,
            )
        return "" if declared == DEFAULT_UNIVERSE_DOMAIN else declared

    if not _is_default(implied):
        raise UniverseDomainMismatchError(
            f"credentials use universe domain {implied!r} but universe_domain is not set; "
            f"declare universe_domain = {implied!r}",
            declared=None,
            implied=implied,
        )
    return ""


__all__ = [
    "DEFAULT_UNIVERSE_DOMAIN",
    "validate_universe_domain",
]
