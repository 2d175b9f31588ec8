#!/usr/bin/env python3
"""
Basic usage examples for lin-api.

Builds a few request descriptors and shows how a transport would pick them up.
"""

from lin_api import api, groups, updates


def group_discussion():
    """Read a group's recent posts and start a new discussion."""
    print("=== Group Discussion ===")

    listing = groups.posts(547033, count=10, after=1323726382)
    print(f"✓ {listing.method} {listing.path}")

    post = groups.post_to_group(547033, "Check this out...", "Really interesting.")
    print(f"✓ {post.method} {post.path}")
    print(f"✓ Body: {post.body}")


def share_article():
    """Share an article to the update stream."""
    print("\n=== Share ===")

    descriptor = updates.share(
        content_title="What You Can Learn",
        content_url="http://www.linkedin.com/today/article?articleID=5562792952759058434",
        comment="set your alarm clocks",
    )
    if descriptor is None:
        print("❌ Nothing to share")
        return

    request = descriptor.to_httpx()
    print(f"✓ {request.method} {request.url}")
    print(f"✓ Body: {descriptor.body}")


def dispatch_by_name():
    """Select builders by name, as a config-driven caller would."""
    print("\n=== Dispatch by Name ===")

    descriptor = api("v1", "peopleAPI", "profile", id="15003820", authToken="NAME:Yc02")
    print(f"✓ {descriptor.path}")

    descriptor = api("v1", "groupsAPI", "posts", 547033, {"after": 1323726382, "count": 10})
    print(f"✓ {descriptor.path}")

    missing = api("v1", "groupsAPI", "show", None)
    print(f"✓ Missing group id gives: {missing}")


if __name__ == "__main__":
    group_discussion()
    share_article()
    dispatch_by_name()
