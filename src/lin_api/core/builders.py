"""
Pure functions shared by the endpoint builders.

Functions for resolving field selections and headers, assembling query
strings and serializing request bodies, without I/O dependencies.
"""

import json
import re
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple
from urllib.parse import quote, unquote

JSON_FORMAT_HEADERS: Mapping[str, str] = {"x-li-format": "json"}
JSON_BODY_HEADERS: Mapping[str, str] = {
    "x-li-format": "json",
    "Content-Type": "application/json;charset=UTF-8",
}
XML_BODY_HEADERS: Mapping[str, str] = {
    "x-li-format": "xml",
    "Content-Type": "text/xml;charset=UTF-8",
}

# ECMAScript encodeURI / encodeURIComponent reserved sets
_URI_SAFE = ";,/?:@&=+$!~*'()#"
_URI_COMPONENT_SAFE = "!~*'()"

_IMAGE_PROXY_RE = re.compile(r"media\.linkedin\.com.+?url=(.+)")
_CAMEL_RE = re.compile(r"([A-Z])")


def js_string(value: Any) -> str:
    """Coerce a value to the string the provider expects in a URL or flag."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def is_true_flag(value: Any, default: bool = True) -> bool:
    """Interpret a like/twitter style flag by string comparison against "true"."""
    if value is None:
        return default
    return js_string(value) == "true"


def is_set(value: Any) -> bool:
    return value is not None


def is_truthy(value: Any) -> bool:
    return bool(value)


def resolve_fields(fields: Optional[str], default: str) -> str:
    """Return the caller's field selection verbatim, or the default."""
    return fields if fields else default


def resolve_headers(
    headers: Optional[Mapping[str, str]], default: Mapping[str, str]
) -> Dict[str, str]:
    """Caller headers replace the defaults entirely; never merged."""
    return dict(headers) if headers else dict(default)


def query_pairs(
    values: Iterable[Tuple[str, Any]],
    present: Callable[[Any], bool] = is_set,
    encode: Optional[Callable[[str], str]] = None,
) -> List[str]:
    """Build ``key=value`` strings in order, skipping values that are not present."""
    params = []
    for key, value in values:
        if not present(value):
            continue
        text = js_string(value)
        params.append(f"{key}={encode(text) if encode else text}")
    return params


def join_query(path: str, params: Sequence[str]) -> str:
    """Append ``?`` and the joined params, only when there are any."""
    if not params:
        return path
    return path + "?" + "&".join(params)


def to_json(payload: Any) -> str:
    """Serialize a body as compact JSON."""
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)


def xml_escape(text: Any) -> str:
    """Substitute ampersand, angle brackets and quotes in XML text content."""
    return (
        js_string(text)
        .replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&#039;")
        .replace("&amp;#187;", "&#187;")
    )


def xml_fragment(root: str, children: Sequence[Tuple[str, Any]]) -> str:
    """Build a flat ``<root><child>text</child>...</root>`` fragment."""
    inner = "".join(f"<{tag}>{xml_escape(text)}</{tag}>" for tag, text in children)
    return f"<{root}>{inner}</{root}>"


def condition_image_url(image_url: str) -> str:
    """Strip the media proxy wrapper from an image URL, if present.

    Proxied image URLs embed the originally submitted URL, percent-encoded,
    in a ``url=`` parameter. Any other URL is returned unchanged.
    """
    match = _IMAGE_PROXY_RE.search(image_url)
    if match:
        return unquote(match.group(1))
    return image_url


def dasherize(name: str) -> str:
    """Convert ``firstName`` style names to ``first-name``."""
    return _CAMEL_RE.sub(lambda m: "-" + m.group(1).lower(), name)


def encode_uri(value: str) -> str:
    return quote(value, safe=_URI_SAFE)


def encode_uri_component(value: str) -> str:
    return quote(value, safe=_URI_COMPONENT_SAFE)
