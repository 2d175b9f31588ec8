"""
Default field-selection expressions shared across endpoint groups.

These are opaque strings in the provider's partial-response syntax. They are
only ever concatenated into paths, never parsed.
"""


def standard_person_fields() -> str:
    return "id,first-name,last-name,formatted-name,headline,picture-url,auth-token,distance"


def basic_person_fields() -> str:
    return "id,first-name,last-name,headline,picture-url,auth-token,distance"


STANDARD_UPDATE_FIELDS = (
    "timestamp,update-key,update-type,update-content:(person:(id,first-name,last-name,"
    "formatted-name,headline,picture-url,auth-token,distance,connections,current-share,"
    "main-address,twitter-accounts,im-accounts,phone-numbers,date-of-birth,member-groups)),"
    "updated-fields,is-commentable,update-comments,is-likable,is-liked,num-likes"
)


def default_topic_fields() -> str:
    return (
        ":(id,title,description,because-of,topic-stories:(topic-articles:(is-read,"
        "relevance-data:(global-share-count,in-topic-share-count),article-content,"
        "shared-in-network-count,trending-in-entities:(industries:(id,relation-to-viewer)),"
        "shared-by-people:(" + standard_person_fields() + "))))"
    )


def default_article_fields() -> str:
    return (
        ":(is-read,when-saved,relevance-data,article-content,shared-in-network-count,"
        "trending-in-entities:(industries:(id,relation-to-viewer)),"
        "shared-by-people:(" + standard_person_fields() + "))"
    )
