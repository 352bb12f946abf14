"""
Storefront - Main Application Entry Point
"""
import streamlit as st

from storefront.components.navigation import get_navigator
from storefront.config.settings import settings
from storefront.core.logging import get_logger
from storefront.core.session import init_session_state, is_authenticated, remember_prior_location
from storefront.pages.auth_page import render_auth_page
from storefront.pages.orders import render_checkout, render_orders, render_place_order

logger = get_logger(__name__)
logger.info("Storefront application starting...")


def build_pages():
    """Page registry keyed by URL path."""
    return {
        # Default page must be declared with default=True.
        settings.AUTH_FALLBACK_PATH: st.Page(
            render_place_order, title="Place Order", icon="🛒", default=True
        ),
        "/checkout": st.Page(render_checkout, title="Checkout", icon="💳", url_path="checkout"),
        "/orders": st.Page(render_orders, title="My Orders", icon="📦", url_path="orders"),
    }


def main():
    """Main application entry point"""
    logger.info("Main application function started")

    st.set_page_config(
        page_title=settings.PAGE_TITLE,
        page_icon=settings.PAGE_ICON,
        layout=settings.LAYOUT
    )

    init_session_state()

    pages = build_pages()
    navigator = get_navigator(settings.AUTH_FALLBACK_PATH)
    navigator.update_pages(pages)

    authenticated = is_authenticated()
    nav = st.navigation(list(pages.values()), position="sidebar" if authenticated else "hidden")

    if not authenticated:
        # Remember protected pages so the user lands back on them after signing in.
        if nav.url_path:
            remember_prior_location(f"/{nav.url_path}")
        logger.debug(f"User not authenticated - showing login/register | requested: /{nav.url_path}")
        render_auth_page(navigator)
        return

    logger.debug(f"Authenticated user session | email: {st.session_state.get('email')}")
    nav.run()


if __name__ == "__main__":
    main()
