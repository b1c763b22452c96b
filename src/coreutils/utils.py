"""
Core helpers shared by the bidding script

Three independent, stateless functions:
- encode_parameters: flat mapping -> query string
- get_value_from_json: dotted path lookup in nested API responses
- get_api_headers: positions of "api:<name>" columns in a header row
"""

from typing import Any, Dict, Mapping, Sequence

API_HEADER_PREFIX = "api:"
PATH_SEPARATOR = "."

_NO_DEFAULT = object()


class PathNotFoundError(LookupError):
    """Raised when a path segment cannot be resolved against a document"""

    def __init__(self, path: str, segment: str):
        self.path = path
        self.segment = segment
        super().__init__(f"Path {path!r} not found: cannot resolve segment {segment!r}")


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    return str(value)


def encode_parameters(params: Mapping[str, Any]) -> str:
    """Join params into "key=value" pairs separated by "&" (values are not escaped)

    Args:
        params: Flat mapping of parameter names to scalar values

    Returns:
        Query string in the mapping's iteration order, "" for an empty mapping
    """
    return "&".join(f"{key}={_format_value(value)}" for key, value in params.items())


def _is_sequence(node: Any) -> bool:
    return isinstance(node, Sequence) and not isinstance(node, (str, bytes, bytearray))


def get_value_from_json(path: str, document: Any, default: Any = _NO_DEFAULT) -> Any:
    """Resolve a dotted path such as "daily.0.weather.id" against a document

    Mapping nodes are indexed by key, sequence nodes by a non-negative
    integer segment.

    Args:
        path: Dot-separated segments
        document: Nested mappings/sequences as returned by json.loads
        default: Returned instead of raising when the path is unresolved

    Returns:
        The value found, with its original type

    Raises:
        PathNotFoundError: If a segment cannot be resolved and no default was given
    """
    node = document

    for segment in path.split(PATH_SEPARATOR):
        if isinstance(node, Mapping):
            if segment not in node:
                break
            node = node[segment]
        elif _is_sequence(node):
            # plain ASCII digits only; "-1" is rejected so indexing never wraps around
            if not (segment.isascii() and segment.isdigit()) or int(segment) >= len(node):
                break
            node = node[int(segment)]
        else:
            break
    else:
        return node

    if default is not _NO_DEFAULT:
        return default
    raise PathNotFoundError(path, segment)


def get_api_headers(lines: Sequence[str]) -> Dict[str, int]:
    """Map each "api:<name>" line to its index in lines

    Args:
        lines: Header row cells

    Returns:
        Dict of name -> original position; non-marker lines are skipped
    """
    headers = {}
    for index, line in enumerate(lines):
        if isinstance(line, str) and line.startswith(API_HEADER_PREFIX):
            headers[line[len(API_HEADER_PREFIX) :]] = index
    return headers

