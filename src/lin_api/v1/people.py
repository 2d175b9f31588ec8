"""
People endpoints: profiles, connections and people search.
"""

from typing import Any, Mapping, Optional

from ..core.builders import (
    JSON_FORMAT_HEADERS,
    dasherize,
    encode_uri,
    is_truthy,
    join_query,
    query_pairs,
    resolve_fields,
    resolve_headers,
)
from ..core.fields import standard_person_fields
from ..models import RequestDescriptor

PEOPLE_RESOURCE = "people"


def profile(
    *,
    member_id: Any = None,
    fields: Optional[str] = None,
    auth_token: Optional[str] = None,
    start: Any = None,
    count: Any = None,
    headers: Optional[Mapping[str, str]] = None,
) -> RequestDescriptor:
    """Get a member's profile, or your own when no id is given.

    Profiles outside your first-degree network need the ``auth_token``
    returned by search; it is sent both as a query parameter and as the
    ``x-li-auth-token`` header.
    """
    path = f"people/{member_id or '~'}" + resolve_fields(
        fields, ":(" + standard_person_fields() + ")"
    )
    resolved = resolve_headers(headers, JSON_FORMAT_HEADERS)
    if auth_token:
        resolved["x-li-auth-token"] = auth_token
    params = query_pairs(
        [("auth-token", auth_token), ("start", start), ("count", count)],
        present=is_truthy,
    )
    return RequestDescriptor(
        method="GET",
        path=join_query(path, params),
        headers=resolved,
        resource=PEOPLE_RESOURCE,
    )


def connections(
    *,
    member_id: Any = None,
    fields: Optional[str] = None,
    start: Any = None,
    count: Any = None,
    since: Any = None,
    modified: Optional[str] = None,
    headers: Optional[Mapping[str, str]] = None,
) -> RequestDescriptor:
    """Get a member's first-degree connections.

    ``since`` is a millisecond timestamp applied to the modified field;
    ``modified`` is one of "new", "updated" or "new-or-updated".
    """
    path = (
        f"people/{member_id or '~'}/connections"
        + resolve_fields(fields, ":(" + standard_person_fields() + ")")
    )
    params = query_pairs(
        [
            ("start", start),
            ("count", count),
            ("modified-since", since),
            ("modified", modified),
        ],
        present=is_truthy,
    )
    return RequestDescriptor(
        method="GET",
        path=join_query(path, params),
        headers=resolve_headers(headers, JSON_FORMAT_HEADERS),
        resource=PEOPLE_RESOURCE,
    )


def search(
    *,
    fields: Optional[str] = None,
    keywords: Optional[str] = None,
    first_name: Optional[str] = None,
    last_name: Optional[str] = None,
    company_name: Optional[str] = None,
    current_company: Any = None,
    title: Optional[str] = None,
    current_title: Any = None,
    school_name: Optional[str] = None,
    current_school: Any = None,
    country_code: Optional[str] = None,
    postal_code: Optional[str] = None,
    distance: Any = None,
    start: Any = None,
    count: Any = None,
    sort: Optional[str] = None,
    network_options: Optional[str] = None,
    headers: Optional[Mapping[str, str]] = None,
) -> RequestDescriptor:
    """Search for people.

    ``network_options`` is a comma separated subset of "F", "S", "A" and "O"
    and is sent as a network facet.
    """
    # camelCase wire names, in emitted order
    values = {
        "keywords": keywords,
        "firstName": first_name,
        "lastName": last_name,
        "companyName": company_name,
        "currentCompany": current_company,
        "title": title,
        "currentTitle": current_title,
        "schoolName": school_name,
        "currentSchool": current_school,
        "countryCode": country_code,
        "postalCode": postal_code,
        "distance": distance,
        "start": start,
        "count": count,
        "sort": sort,
    }
    params = query_pairs(
        [(dasherize(key), value) for key, value in values.items()],
        present=is_truthy,
        encode=encode_uri,
    )
    if network_options:
        params.append("facet=network," + network_options)

    path = "people-search" + resolve_fields(
        fields, ":(people:(" + standard_person_fields() + "))"
    )
    return RequestDescriptor(
        method="GET",
        path=join_query(path, params),
        headers=resolve_headers(headers, JSON_FORMAT_HEADERS),
        resource=PEOPLE_RESOURCE,
    )
