"""
Authentication page (Login/Register).
"""
import asyncio

import streamlit as st

from storefront.api.auth import HttpAuthProvider
from storefront.components.navigation import PageNavigator
from storefront.components.notifications import ToastNotificationSink
from storefront.core.auth import store_session
from storefront.core.flow import FlowController
from storefront.core.logging import get_logger
from storefront.core.session import FLOW_CONTROLLER_KEY, get_prior_location

logger = get_logger(__name__)


def get_flow_controller(navigator: PageNavigator) -> FlowController:
    """One controller per browser session; created when the auth flow starts."""
    controller = st.session_state.get(FLOW_CONTROLLER_KEY)
    if controller is None:
        prior_location = get_prior_location()
        logger.debug(f"Starting auth flow | from: {prior_location}")
        controller = FlowController(
            provider=HttpAuthProvider(on_session=store_session),
            navigator=navigator,
            notifications=ToastNotificationSink(),
            prior_location=prior_location,
        )
        st.session_state[FLOW_CONTROLLER_KEY] = controller
    return controller


def render_auth_page(navigator: PageNavigator):
    """Render login/register page"""
    logger.debug("Rendering authentication page")

    st.title("Welcome")
    st.caption("Sign in to place your order")

    controller = get_flow_controller(navigator)
    error_slot = st.empty()

    login_tab, register_tab = st.tabs(["Login", "Register"])
    with login_tab:
        render_login(controller)
    with register_tab:
        render_register(controller)

    if controller.error:
        error_slot.error(controller.error)

    navigator.follow()


def render_login(controller: FlowController):
    """Render login form"""
    with st.form("login_form"):
        st.subheader("Sign In")
        st.caption("Enter your credentials to access your account")
        email = st.text_input("Email", placeholder="Enter your email", key="login_email")
        password = st.text_input(
            "Password", type="password", placeholder="Enter your password", key="login_password"
        )
        submitted = st.form_submit_button(
            "Sign In", disabled=controller.is_loading, use_container_width=True
        )

    if submitted:
        with st.spinner("Signing in..."):
            asyncio.run(controller.handle_login({"email": email, "password": password}))


def render_register(controller: FlowController):
    """Render registration form"""
    with st.form("register_form"):
        st.subheader("Create Account")
        st.caption("Sign up to start placing orders")
        name = st.text_input("Full Name", placeholder="Enter your full name", key="register_name")
        email = st.text_input("Email", placeholder="Enter your email", key="register_email")
        password = st.text_input(
            "Password", type="password", placeholder="Create a password", key="register_password"
        )
        confirm_password = st.text_input(
            "Confirm Password", type="password", placeholder="Confirm your password",
            key="register_confirm_password",
        )
        submitted = st.form_submit_button(
            "Create Account", disabled=controller.is_loading, use_container_width=True
        )

    if submitted:
        with st.spinner("Creating account..."):
            asyncio.run(controller.handle_register({
                "name": name,
                "email": email,
                "password": password,
                "confirmPassword": confirm_password,
            }))
