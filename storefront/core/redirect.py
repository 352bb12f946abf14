"""
Post-authentication redirect resolution.
"""
from typing import Optional

from storefront.config.settings import settings
from storefront.schemas.auth import PriorLocation, RedirectTarget


def resolve_redirect(
    prior_location: Optional[PriorLocation] = None, fallback_path: Optional[str] = None
) -> RedirectTarget:
    """
    Resolve where the user lands after signing in.

    Users sent here from another page go back to it; everyone else lands on the
    fallback path. History is always replaced so the auth screen is not reachable
    with the back button.
    """
    if prior_location is not None and prior_location.pathname:
        return RedirectTarget(path=prior_location.pathname, replace=True)
    return RedirectTarget(path=fallback_path or settings.AUTH_FALLBACK_PATH, replace=True)
