"""
News endpoints: topics, followed topics, articles and article shares.
"""

from typing import Any, Mapping, Optional

from ..core.builders import (
    JSON_FORMAT_HEADERS,
    encode_uri_component,
    is_truthy,
    join_query,
    js_string,
    query_pairs,
    resolve_fields,
    resolve_headers,
)
from ..core.fields import default_article_fields, default_topic_fields
from ..core.logging import get_logger
from ..models import RequestDescriptor

logger = get_logger("v1.news")

NEWS_RESOURCE = "news"

TOP_NEWS_TOPIC = "id=TOP_NEWS_TODAY"
SHARED_NEWS_TOPIC = "id=FIRST_DEGREE_NEWS_TODAY"


def topic_path(
    topic_id: str,
    *,
    fields: Optional[str] = None,
    start: Any = None,
    count: Any = None,
    max_shared_by_people_degree: Any = None,
    max_shared_by_people_count: Any = None,
    max_articles: Any = None,
    max_stories: Any = None,
) -> str:
    """Build the path for a topic lookup.

    ``topic_id`` is "id=TOP_NEWS_TODAY", "id=FIRST_DEGREE_NEWS_TODAY",
    "type=FOLW" or an escaped topic id. The four ``max_*`` limits are always
    sent; unset or zero values fall back to 1, 1, 0 and 100.
    """
    path = "people/~/topics/" + topic_id + resolve_fields(fields, default_topic_fields())
    params = query_pairs([("count", count), ("start", start)], present=is_truthy)
    params += [
        "max-shared-by-people-degree=" + js_string(max_shared_by_people_degree or 1),
        "max-shared-by-people=" + js_string(max_shared_by_people_count or 1),
        "max-articles=" + js_string(max_articles or 0),
        "max-stories=" + js_string(max_stories or 100),
    ]
    return join_query(path, params)


def top_news(
    *,
    fields: Optional[str] = None,
    start: Any = None,
    count: Any = None,
    max_shared_by_people_degree: Any = None,
    max_shared_by_people_count: Any = None,
    max_articles: Any = None,
    max_stories: Any = None,
    headers: Optional[Mapping[str, str]] = None,
) -> RequestDescriptor:
    """Get today's top news topic. Limits are those of ``topic_path``."""
    return RequestDescriptor(
        method="GET",
        path=topic_path(
            TOP_NEWS_TOPIC,
            fields=fields,
            start=start,
            count=count,
            max_shared_by_people_degree=max_shared_by_people_degree,
            max_shared_by_people_count=max_shared_by_people_count,
            max_articles=max_articles,
            max_stories=max_stories,
        ),
        headers=resolve_headers(headers, JSON_FORMAT_HEADERS),
        resource=NEWS_RESOURCE,
    )


def shared_news(
    *,
    fields: Optional[str] = None,
    start: Any = None,
    count: Any = None,
    max_shared_by_people_degree: Any = None,
    max_shared_by_people_count: Any = None,
    max_articles: Any = None,
    max_stories: Any = None,
    headers: Optional[Mapping[str, str]] = None,
) -> RequestDescriptor:
    """Get today's news shared by first-degree connections."""
    return RequestDescriptor(
        method="GET",
        path=topic_path(
            SHARED_NEWS_TOPIC,
            fields=fields,
            start=start,
            count=count,
            max_shared_by_people_degree=max_shared_by_people_degree,
            max_shared_by_people_count=max_shared_by_people_count,
            max_articles=max_articles,
            max_stories=max_stories,
        ),
        headers=resolve_headers(headers, JSON_FORMAT_HEADERS),
        resource=NEWS_RESOURCE,
    )


def topic_news(
    topic_id: Any,
    *,
    fields: Optional[str] = None,
    start: Any = None,
    count: Any = None,
    max_shared_by_people_degree: Any = None,
    max_shared_by_people_count: Any = None,
    max_articles: Any = None,
    max_stories: Any = None,
    headers: Optional[Mapping[str, str]] = None,
) -> Optional[RequestDescriptor]:
    """Get the articles for a topic id."""
    if not topic_id:
        logger.debug("topic_news: missing topic id")
        return None

    return RequestDescriptor(
        method="GET",
        path=topic_path(
            encode_uri_component(js_string(topic_id)),
            fields=fields,
            start=start,
            count=count,
            max_shared_by_people_degree=max_shared_by_people_degree,
            max_shared_by_people_count=max_shared_by_people_count,
            max_articles=max_articles,
            max_stories=max_stories,
        ),
        headers=resolve_headers(headers, JSON_FORMAT_HEADERS),
        resource=NEWS_RESOURCE,
    )


def followed_topics(
    *,
    start: Any = None,
    count: Any = None,
    headers: Optional[Mapping[str, str]] = None,
) -> RequestDescriptor:
    """List the topics you follow."""
    params = ["type=FOLW"]
    params += query_pairs([("start", start), ("count", count)], present=is_truthy)
    return RequestDescriptor(
        method="GET",
        path=join_query("people/~/topics:(id,title,description,because-of)", params),
        headers=resolve_headers(headers, JSON_FORMAT_HEADERS),
        resource=NEWS_RESOURCE,
    )


def article(
    article_id: Any,
    *,
    fields: Optional[str] = None,
    headers: Optional[Mapping[str, str]] = None,
) -> Optional[RequestDescriptor]:
    if not article_id:
        logger.debug("article: missing article id")
        return None

    return RequestDescriptor(
        method="GET",
        path=f"people/~/articles/{article_id}" + resolve_fields(fields, default_article_fields()),
        headers=resolve_headers(headers, JSON_FORMAT_HEADERS),
        resource=NEWS_RESOURCE,
    )


def shares(
    article_id: Any,
    *,
    count: Any = None,
    after: Any = None,
    headers: Optional[Mapping[str, str]] = None,
) -> Optional[RequestDescriptor]:
    """Get recent shares of an article. ``after`` is a millisecond timestamp."""
    if not article_id:
        logger.debug("shares: missing article id")
        return None

    params = [f"facet=articleID,{article_id}"]
    params += query_pairs([("count", count), ("after", after)], present=is_truthy)
    return RequestDescriptor(
        method="GET",
        path=join_query("signal-search", params),
        headers=resolve_headers(headers, JSON_FORMAT_HEADERS),
        resource=NEWS_RESOURCE,
    )
