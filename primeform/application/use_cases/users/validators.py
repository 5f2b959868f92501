"""Common validation helpers for user use cases."""

from primeform.application.use_cases.notifications.localization import supported_languages


def normalize_email(email: str) -> str:
    """Return ``email`` trimmed and lower-cased or raise ``ValueError``."""

    normalized = email.strip().lower()
    if normalized.count("@") != 1 or normalized.startswith("@") or normalized.endswith("@"):
        raise ValueError("Email address is not valid")
    return normalized


def ensure_supported_language(language: str) -> str:
    """Return the supported primary language code or raise ``ValueError``.

    Region variants such as ``ur-PK`` are stored as their primary subtag.
    """

    code = language.strip().lower().replace("_", "-").split("-", 1)[0]
    supported_codes = supported_languages()
    if code not in supported_codes:
        supported = ", ".join(sorted(supported_codes))
        raise ValueError(f"Unsupported language '{language}'. Supported: {supported}")
    return code
