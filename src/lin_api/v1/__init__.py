"""
Request builders for version 1 of the API.
"""

from . import groups, news, people, updates

# Builders by endpoint group, keyed by snake_case operation name.
OPERATIONS = {
    "people": {
        "profile": people.profile,
        "connections": people.connections,
        "search": people.search,
    },
    "groups": {
        "list": groups.list_groups,
        "recommended": groups.recommended,
        "show": groups.show,
        "posts": groups.posts,
        "show_post": groups.show_post,
        "post_comments": groups.post_comments,
        "post_likes": groups.post_likes,
        "join_group": groups.join_group,
        "leave_group": groups.leave_group,
        "like_post": groups.like_post,
        "create_group": groups.create_group,
        "post_to_group": groups.post_to_group,
        "comment_on_post": groups.comment_on_post,
    },
    "updates": {
        "updates": updates.updates,
        "likes": updates.likes,
        "comments": updates.comments,
        "like": updates.like,
        "comment": updates.comment,
        "share": updates.share,
    },
    "news": {
        "top_news": news.top_news,
        "shared_news": news.shared_news,
        "topic_news": news.topic_news,
        "followed_topics": news.followed_topics,
        "article": news.article,
        "shares": news.shares,
    },
}

__all__ = ["OPERATIONS", "groups", "news", "people", "updates"]
