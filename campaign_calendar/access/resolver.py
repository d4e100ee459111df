"""Address based role resolution.

The caller address is an unverified string supplied by the runtime. It is
matched against the current access map on every call; the result is never
cached so that edits to the map take effect on the next request.
"""

from __future__ import annotations

from campaign_calendar.models.access import AccessMap, AccessRole, AccessScope


def resolve_role(caller_address: str, access_map: AccessMap) -> AccessScope:
    """Return the role and department scope for ``caller_address``.

    Matching is exact; callers normalise the address before resolving.
    Precedence is fixed: the designer address wins over a department entry
    for the same address, and anything unmapped resolves to ``guest``.
    """

    address = caller_address or ""

    if address == access_map.designer_address:
        return AccessScope(role=AccessRole.DESIGNER)

    department_id = access_map.department_addresses.get(address)
    if department_id is not None:
        return AccessScope(role=AccessRole.DEPARTMENT_USER, department_id=department_id)

    return AccessScope(role=AccessRole.GUEST)


__all__ = ["resolve_role"]
