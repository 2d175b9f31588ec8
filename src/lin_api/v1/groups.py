"""
Group endpoints: memberships, group details, posts, and post comments and likes.
"""

from typing import Any, Mapping, Optional, Sequence

from ..core.builders import (
    JSON_BODY_HEADERS,
    JSON_FORMAT_HEADERS,
    XML_BODY_HEADERS,
    is_true_flag,
    is_truthy,
    join_query,
    query_pairs,
    resolve_fields,
    resolve_headers,
    to_json,
    xml_fragment,
)
from ..core.fields import basic_person_fields, standard_person_fields
from ..core.logging import get_logger
from ..models import RequestDescriptor

logger = get_logger("v1.groups")

GROUPS_RESOURCE = "groups"

CREATE_GROUP_FIELDS = (
    "name",
    "category",
    "shortDescription",
    "description",
    "contactEmail",
    "visibility",
    "isOpenToNonMembers",
)


def _post_fields(attachments: bool = True) -> str:
    basic = basic_person_fields()
    attachment = "attachment,attachments" if attachments else "attachment"
    return (
        f":(id,title,site-group-post-url,{attachment},relation-to-viewer:(is-liked),"
        f"summary,creator:({basic}),creation-timestamp,likes:(person:({basic}),timestamp),"
        f"comments:(id,creator:({basic}),creation-timestamp,text))"
    )


def list_groups(
    *,
    membership: Optional[Sequence[str]] = None,
    fields: Optional[str] = None,
    start: Any = None,
    count: Any = None,
    headers: Optional[Mapping[str, str]] = None,
) -> RequestDescriptor:
    """List the groups you belong to.

    ``membership`` is any of "owner", "member" and "manager" and defaults to
    ``["member"]``.
    """
    default_fields = (
        ":(group:(id,name,num-members,counts-by-category,small-logo-url,posts:(id,title,"
        "relation-to-viewer:(is-liked),creator:(" + basic_person_fields() + "),"
        "creation-timestamp,likes,comments)))"
    )
    params = [f"membership-state={state}" for state in (membership or ["member"])]
    params += query_pairs([("start", start), ("count", count)])

    path = "people/~/group-memberships" + resolve_fields(fields, default_fields)
    return RequestDescriptor(
        method="GET",
        path=join_query(path, params),
        headers=resolve_headers(headers, JSON_FORMAT_HEADERS),
        resource=GROUPS_RESOURCE,
    )


def recommended(
    *,
    fields: Optional[str] = None,
    start: Any = None,
    count: Any = None,
    headers: Optional[Mapping[str, str]] = None,
) -> RequestDescriptor:
    """Get recommended groups."""
    path = "people/~/suggestions/groups" + resolve_fields(
        fields,
        ":(id,name,counts-by-category,is-open-to-non-members,large-logo-url,num-members)",
    )
    return RequestDescriptor(
        method="GET",
        path=join_query(path, query_pairs([("start", start), ("count", count)])),
        headers=resolve_headers(headers, JSON_FORMAT_HEADERS),
        resource=GROUPS_RESOURCE,
    )


def show(
    group_id: Any,
    *,
    fields: Optional[str] = None,
    headers: Optional[Mapping[str, str]] = None,
) -> Optional[RequestDescriptor]:
    """Get details for a group."""
    if not group_id:
        logger.debug("show: missing group id")
        return None

    default_fields = (
        ":(id,name,num-members,large-logo-url,is-open-to-non-members,"
        "relation-to-viewer:(membership-state))"
    )
    return RequestDescriptor(
        method="GET",
        path=f"groups/{group_id}" + resolve_fields(fields, default_fields),
        headers=resolve_headers(headers, JSON_FORMAT_HEADERS),
        resource=GROUPS_RESOURCE,
    )


def posts(
    group_id: Any,
    *,
    fields: Optional[str] = None,
    start: Any = None,
    count: Any = None,
    order: Optional[str] = None,
    after: Any = None,
    headers: Optional[Mapping[str, str]] = None,
) -> Optional[RequestDescriptor]:
    """Get discussion posts for a group.

    ``order`` defaults to recency on the provider side; ``after`` is a
    timestamp sent as ``modified-since``.
    """
    if not group_id:
        logger.debug("posts: missing group id")
        return None

    params = query_pairs([("start", start), ("count", count), ("order", order)])
    params += query_pairs([("modified-since", after)], present=is_truthy)
    params.append("category=discussion")

    path = f"groups/{group_id}/posts" + resolve_fields(fields, _post_fields())
    return RequestDescriptor(
        method="GET",
        path=join_query(path, params),
        headers=resolve_headers(headers, JSON_FORMAT_HEADERS),
        resource=GROUPS_RESOURCE,
    )


def join_group(group_id: Any) -> Optional[RequestDescriptor]:
    """Become a member of a group."""
    if not group_id:
        logger.debug("join_group: missing group id")
        return None

    return RequestDescriptor(
        method="PUT",
        path=f"people/~/group-memberships/{group_id}",
        headers=JSON_BODY_HEADERS,
        resource=GROUPS_RESOURCE,
        body=to_json({"membership-state": {"code": "member"}}),
    )


def leave_group(group_id: Any) -> Optional[RequestDescriptor]:
    """Give up membership of a group."""
    if not group_id:
        logger.debug("leave_group: missing group id")
        return None

    return RequestDescriptor(
        method="DELETE",
        path=f"people/~/group-memberships/{group_id}",
        headers=JSON_BODY_HEADERS,
        resource=GROUPS_RESOURCE,
    )


def create_group(body: Optional[Mapping[str, Any]]) -> Optional[RequestDescriptor]:
    """Create a group.

    Only the allow-listed keys in ``CREATE_GROUP_FIELDS`` are copied from
    ``body``, over defaults of a hidden, closed group in the "network"
    category. A ``name`` is required.
    """
    if not body or not body.get("name"):
        logger.debug("create_group: missing group name")
        return None

    payload = {
        "visibility": {"code": "hidden"},
        "isOpenToNonMembers": False,
        "category": {"code": "network"},
    }
    for key in CREATE_GROUP_FIELDS:
        if body.get(key):
            payload[key] = body[key]

    return RequestDescriptor(
        method="POST",
        path="groups",
        headers=JSON_BODY_HEADERS,
        resource=GROUPS_RESOURCE,
        body=to_json(payload),
    )


def post_to_group(group_id: Any, title: Any, summary: Any) -> Optional[RequestDescriptor]:
    """Start a discussion in a group. The endpoint only accepts XML."""
    if not group_id or not title or not summary:
        logger.debug("post_to_group: missing group id, title or summary")
        return None

    return RequestDescriptor(
        method="POST",
        path=f"groups/{group_id}/posts",
        headers=XML_BODY_HEADERS,
        resource=GROUPS_RESOURCE,
        body=xml_fragment("post", [("title", title), ("summary", summary)]),
    )


def show_post(
    post_id: Any,
    *,
    fields: Optional[str] = None,
    headers: Optional[Mapping[str, str]] = None,
) -> Optional[RequestDescriptor]:
    """Get a single group post."""
    if not post_id:
        logger.debug("show_post: missing post id")
        return None

    return RequestDescriptor(
        method="GET",
        path=f"posts/{post_id}" + resolve_fields(fields, _post_fields(attachments=False)),
        headers=resolve_headers(headers, JSON_FORMAT_HEADERS),
        resource=GROUPS_RESOURCE,
    )


def post_comments(
    post_id: Any,
    *,
    fields: Optional[str] = None,
    start: Any = None,
    count: Any = None,
    headers: Optional[Mapping[str, str]] = None,
) -> Optional[RequestDescriptor]:
    """Get the comments on a group post."""
    if not post_id:
        logger.debug("post_comments: missing post id")
        return None

    default_fields = (
        ":(id,creator:(" + standard_person_fields() + "),creation-timestamp,text)"
    )
    path = f"posts/{post_id}/comments" + resolve_fields(fields, default_fields)
    return RequestDescriptor(
        method="GET",
        path=join_query(path, query_pairs([("start", start), ("count", count)])),
        headers=resolve_headers(headers, JSON_FORMAT_HEADERS),
        resource=GROUPS_RESOURCE,
    )


def post_likes(
    post_id: Any,
    *,
    fields: Optional[str] = None,
    start: Any = None,
    count: Any = None,
    headers: Optional[Mapping[str, str]] = None,
) -> Optional[RequestDescriptor]:
    """Get the people who liked a group post."""
    if not post_id:
        logger.debug("post_likes: missing post id")
        return None

    default_fields = ":(person:(" + standard_person_fields() + "),timestamp)"
    path = f"posts/{post_id}/likes" + resolve_fields(fields, default_fields)
    return RequestDescriptor(
        method="GET",
        path=join_query(path, query_pairs([("start", start), ("count", count)])),
        headers=resolve_headers(headers, JSON_FORMAT_HEADERS),
        resource=GROUPS_RESOURCE,
    )


def like_post(post_id: Any, do_like: Any = None) -> Optional[RequestDescriptor]:
    """Like or unlike a group post.

    ``do_like`` is compared as a string against "true"; None means like.
    """
    if not post_id:
        logger.debug("like_post: missing post id")
        return None

    return RequestDescriptor(
        method="PUT",
        path=f"posts/{post_id}/relation-to-viewer/is-liked",
        headers=JSON_BODY_HEADERS,
        resource=GROUPS_RESOURCE,
        body="true" if is_true_flag(do_like) else "false",
    )


def comment_on_post(post_id: Any, comment: Any) -> Optional[RequestDescriptor]:
    """Comment on a group post. The endpoint only accepts XML."""
    if not post_id or not comment:
        logger.debug("comment_on_post: missing post id or comment")
        return None

    return RequestDescriptor(
        method="POST",
        path=f"posts/{post_id}/comments",
        headers=XML_BODY_HEADERS,
        resource=GROUPS_RESOURCE,
        body=xml_fragment("comment", [("text", comment)]),
    )
