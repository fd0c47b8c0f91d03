"""Authorization header builders and secret masking."""

from orama_core.core.constants import H_AUTHORIZATION


def master_auth_headers(master_api_key: str) -> dict[str, str]:
    """Build headers for administrative endpoints.

    Args:
        master_api_key: The master API key.

    Returns:
        dict[str, str]: ``Authorization: Bearer <key>``.
    """
    return {H_AUTHORIZATION: f"Bearer {master_api_key}"}


def write_auth_headers(write_api_key: str) -> dict[str, str]:
    """Build headers for collection write endpoints.

    The service expects the raw key here, without a ``Bearer`` prefix.

    Args:
        write_api_key: The collection's write API key.

    Returns:
        dict[str, str]: ``Authorization: <key>``.
    """
    return {H_AUTHORIZATION: write_api_key}


def mask_secret(secret: str | None, visible: int = 4) -> str:
    """Render a secret safely for logs and reprs."""
    if not secret:
        return "<unset>"
    if len(secret) <= visible * 2:
        return "*" * len(secret)
    return f"{secret[:visible]}...{'*' * visible}"
