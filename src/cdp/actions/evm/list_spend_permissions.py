from __future__ import annotations

from ...client import CdpApiClient
from .types import (
    ListSpendPermissionsOptions,
    ListSpendPermissionsResult,
    SpendPermissionNetwork,
)


async def list_spend_permissions(
    client: CdpApiClient,
    options: ListSpendPermissionsOptions,
) -> ListSpendPermissionsResult:
    """
    List the spend permissions granted by a smart account.

    Allowance, salt, period, start and end arrive as decimal strings and
    are returned as ints.
    """
    response = await client.list_spend_permissions(
        options.address,
        page_size=options.page_size,
        page_token=options.page_token,
    )

    return ListSpendPermissionsResult(
        spend_permissions=[
            SpendPermissionNetwork.from_api(p)
            for p in response.get("spendPermissions", [])
        ],
        next_page_token=response.get("nextPageToken"),
    )
