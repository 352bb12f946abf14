"""
Authentication state helpers.
"""
import streamlit as st

from storefront.core.logging import get_logger
from storefront.core.session import FLOW_CONTROLLER_KEY, clear_session_state
from storefront.schemas.auth import Session

logger = get_logger(__name__)


def store_session(session: Session):
    """Persist a freshly issued session into Streamlit session state"""
    st.session_state["token"] = session.access_token
    st.session_state["email"] = session.email
    st.session_state["name"] = session.name
    st.session_state["role"] = session.role
    logger.info(f"Authentication state set | email: {session.email} | role: {session.role}")


def clear_auth_state():
    """Clear authentication state"""
    email = st.session_state.get("email", "unknown")
    logger.info(f"Clearing authentication state | user: {email}")
    controller = st.session_state.get(FLOW_CONTROLLER_KEY)
    if controller is not None:
        # a response arriving after logout must not sign the user back in
        controller.cancel()
    clear_session_state()


def logout_user():
    """Logout user and clear authentication state"""
    email = st.session_state.get("email", "unknown")
    logger.info(f"User logged out: {email}")
    clear_auth_state()
    st.rerun()
