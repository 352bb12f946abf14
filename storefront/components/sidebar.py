"""
Sidebar component.
"""
import streamlit as st

from storefront.core.auth import logout_user
from storefront.core.session import get_current_user


def render_sidebar():
    """Render the sidebar with user info and logout"""
    user = get_current_user()

    st.sidebar.write(f"Welcome, {user['name'] or user['email']}!")

    if st.sidebar.button("Logout"):
        logout_user()
