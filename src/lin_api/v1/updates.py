"""
Network update endpoints: the update stream, likes, comments and shares.
"""

from typing import Any, Dict, Mapping, Optional

from ..core.builders import (
    JSON_BODY_HEADERS,
    JSON_FORMAT_HEADERS,
    condition_image_url,
    is_true_flag,
    is_truthy,
    join_query,
    query_pairs,
    resolve_fields,
    resolve_headers,
    to_json,
)
from ..core.fields import STANDARD_UPDATE_FIELDS, standard_person_fields
from ..core.logging import get_logger
from ..models import RequestDescriptor

logger = get_logger("v1.updates")

UPDATE_RESOURCE = "updates"


def _update_key_path(update_key: Any, suffix: str) -> str:
    return f"people/~/network/updates/key={update_key}/{suffix}"


def updates(
    types: Optional[str],
    *,
    member_id: Any = None,
    fields: Optional[str] = None,
    start: Any = None,
    count: Any = None,
    scope: Optional[str] = None,
    before: Any = None,
    after: Any = None,
    headers: Optional[Mapping[str, str]] = None,
) -> Optional[RequestDescriptor]:
    """Get network updates.

    ``types`` is a comma separated list such as "CONN,PICT,SHAR". Updates of
    another member are only visible with ``scope="self"``, which returns what
    that member sent rather than what they received. ``before`` and
    ``after`` are millisecond timestamps.
    """
    if not types:
        logger.debug("updates: missing update types")
        return None

    path = (
        f"people/{member_id or '~'}/network/updates"
        + resolve_fields(fields, ":(" + STANDARD_UPDATE_FIELDS + ")")
    )
    params = [f"type={update_type}" for update_type in types.split(",")]
    params += query_pairs(
        [
            ("start", start),
            ("count", count),
            ("scope", scope),
            ("before", before),
            ("after", after),
        ],
        present=is_truthy,
    )
    return RequestDescriptor(
        method="GET",
        path=join_query(path, params),
        headers=resolve_headers(headers, JSON_FORMAT_HEADERS),
        resource=UPDATE_RESOURCE,
    )


def likes(
    update_key: Any,
    *,
    fields: Optional[str] = None,
    start: Any = None,
    count: Any = None,
    headers: Optional[Mapping[str, str]] = None,
) -> Optional[RequestDescriptor]:
    """Get the likes on a network update."""
    if not update_key:
        logger.debug("likes: missing update key")
        return None

    path = _update_key_path(update_key, "likes") + resolve_fields(
        fields, ":(person:(" + standard_person_fields() + "))"
    )
    params = query_pairs([("start", start), ("count", count)], present=is_truthy)
    return RequestDescriptor(
        method="GET",
        path=join_query(path, params),
        headers=resolve_headers(headers, JSON_FORMAT_HEADERS),
        resource=UPDATE_RESOURCE,
    )


def comments(
    update_key: Any,
    *,
    fields: Optional[str] = None,
    start: Any = None,
    count: Any = None,
    headers: Optional[Mapping[str, str]] = None,
) -> Optional[RequestDescriptor]:
    """Get the comments on a network update."""
    if not update_key:
        logger.debug("comments: missing update key")
        return None

    default_fields = (
        ":(id,sequence-number,comment,timestamp,person:("
        + standard_person_fields()
        + ",api-standard-profile-request))"
    )
    path = _update_key_path(update_key, "update-comments") + resolve_fields(
        fields, default_fields
    )
    params = query_pairs([("start", start), ("count", count)], present=is_truthy)
    return RequestDescriptor(
        method="GET",
        path=join_query(path, params),
        headers=resolve_headers(headers, JSON_FORMAT_HEADERS),
        resource=UPDATE_RESOURCE,
    )


def like(update_key: Any, do_like: Any = None) -> Optional[RequestDescriptor]:
    """Like or unlike a network update.

    ``do_like`` is compared as a string against "true"; None means like.
    """
    if not update_key:
        logger.debug("like: missing update key")
        return None

    return RequestDescriptor(
        method="PUT",
        path=_update_key_path(update_key, "is-liked"),
        headers=JSON_BODY_HEADERS,
        resource=UPDATE_RESOURCE,
        body="true" if is_true_flag(do_like) else "false",
    )


def comment(update_key: Any, text: Any) -> Optional[RequestDescriptor]:
    """Comment on a network update."""
    if not update_key or not text:
        logger.debug("comment: missing update key or comment text")
        return None

    return RequestDescriptor(
        method="POST",
        path=_update_key_path(update_key, "update-comments"),
        headers=JSON_BODY_HEADERS,
        resource=UPDATE_RESOURCE,
        body=to_json({"comment": text}),
    )


def share(
    *,
    comment: Optional[str] = None,
    content_title: Optional[str] = None,
    content_url: Optional[str] = None,
    content_image: Optional[str] = None,
    description: Optional[str] = None,
    content_id: Any = None,
    article_id: Any = None,
    visibility: Optional[str] = None,
    twitter: Any = None,
) -> Optional[RequestDescriptor]:
    """Post a SHAR update to the stream.

    A share needs a ``comment``, a ``content_title`` with a ``content_url``,
    or a ``content_id`` to re-share. ``visibility`` is "connections" or
    "anyone" (the default). With ``twitter`` set, the share is also posted
    to the member's Twitter stream.

    Example:
        >>> share(comment="hi").body
        '{"visibility":{"code":"anyone"},"comment":"hi"}'
    """
    if not (comment or (content_title and content_url) or content_id):
        logger.debug("share: no comment, title and url, or content id")
        return None

    path = "people/~/shares"
    if is_true_flag(twitter, default=False):
        path += "?twitter-post=true"

    code = "connections-only" if visibility == "connections" else "anyone"
    payload: Dict[str, Any] = {"visibility": {"code": code}}
    if comment:
        payload["comment"] = comment
    if content_title and content_url:
        content = {"title": content_title, "submitted-url": content_url}
        if content_image:
            content["submitted-image-url"] = condition_image_url(content_image)
        if description:
            content["description"] = description
        payload["content"] = content
    elif content_id:
        payload["attribution"] = {"share": {"id": content_id}}
    elif article_id:
        payload["content"] = {"article-id": article_id}

    return RequestDescriptor(
        method="POST",
        path=path,
        headers=JSON_BODY_HEADERS,
        resource=UPDATE_RESOURCE,
        body=to_json(payload),
    )
