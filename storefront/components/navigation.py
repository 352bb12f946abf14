"""
Navigator backed by Streamlit multipage navigation.
"""
from typing import Mapping, Optional

import streamlit as st

from storefront.core.logging import get_logger
from storefront.core.session import NAVIGATOR_KEY, forget_prior_location

logger = get_logger(__name__)


class PageNavigator:
    """
    Switches to registered pages by URL path, e.g. "/checkout".

    ``st.switch_page`` stops the running script, so ``navigate`` only records
    the destination and ``follow`` performs the switch once the flow has
    returned control to the page.
    """

    def __init__(self, default_path: str):
        self._default_path = default_path
        self._pages = {}
        self._pending: Optional[str] = None

    def update_pages(self, pages: Mapping[str, "st.Page"]):
        """Pages are rebuilt on every script run."""
        self._pages = dict(pages)

    def navigate(self, path: str, replace: bool = True) -> None:
        if replace:
            # the auth screen should not come back once we leave it
            forget_prior_location()
        self._pending = path

    def follow(self):
        if self._pending is None:
            return
        path, self._pending = self._pending, None
        page = self._pages.get(path)
        if page is None:
            logger.warning(f"No page registered for {path} - using {self._default_path}")
            page = self._pages[self._default_path]
        st.switch_page(page)


def get_navigator(default_path: str) -> PageNavigator:
    """The navigator lives in session state so the auth flow keeps a stable reference."""
    navigator = st.session_state.get(NAVIGATOR_KEY)
    if navigator is None:
        navigator = PageNavigator(default_path)
        st.session_state[NAVIGATOR_KEY] = navigator
    return navigator
