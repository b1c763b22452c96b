from typing import Any, Mapping, Optional

from src.coreutils.utils import encode_parameters


def build_url(base_url: str, params: Optional[Mapping[str, Any]] = None) -> str:
    """Append encoded query parameters to a base URL.

    Args:
        base_url: Endpoint URL, may already carry a query string
        params: Optional query parameters (emitted as-is, not escaped)

    Returns:
        The full request URL
    """
    query = encode_parameters(params or {})
    if not query:
        return base_url

    if "?" not in base_url:
        separator = "?"
    elif base_url.endswith(("?", "&")):
        separator = ""
    else:
        separator = "&"
    return f"{base_url}{separator}{query}"
