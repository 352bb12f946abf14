"""
Session state management utilities.
"""
from typing import Optional

import streamlit as st

from storefront.schemas.auth import PriorLocation

PRIOR_LOCATION_KEY = "auth_from"
FLOW_CONTROLLER_KEY = "auth_flow"
NAVIGATOR_KEY = "navigator"


def init_session_state():
    """Initialize session state variables"""
    if PRIOR_LOCATION_KEY not in st.session_state:
        st.session_state[PRIOR_LOCATION_KEY] = None


def clear_session_state():
    """Clear all session state"""
    for key in list(st.session_state.keys()):
        del st.session_state[key]


def is_authenticated() -> bool:
    """Check if user is authenticated"""
    return "token" in st.session_state and st.session_state["token"] is not None


def get_current_user():
    """Get current user information"""
    return {
        "email": st.session_state.get("email"),
        "name": st.session_state.get("name"),
        "role": st.session_state.get("role", "user"),
        "token": st.session_state.get("token")
    }


def remember_prior_location(pathname: Optional[str]):
    """Record the page an unauthenticated visitor asked for."""
    if pathname and st.session_state.get(PRIOR_LOCATION_KEY) is None:
        st.session_state[PRIOR_LOCATION_KEY] = {"pathname": pathname}


def get_prior_location() -> Optional[PriorLocation]:
    state = st.session_state.get(PRIOR_LOCATION_KEY)
    if not state:
        return None
    return PriorLocation(**state)


def forget_prior_location():
    st.session_state[PRIOR_LOCATION_KEY] = None
