"""HTTP client for the Incalink groups API."""

from incalink.client.groups import (  # noqa: F401
    GroupsApiError,
    GroupsClient,
    create_group,
    delete_group,
    get_group_by_id,
    get_groups,
    update_group,
)
