"""
Toast notifications.
"""
import streamlit as st


class ToastNotificationSink:
    def show(self, title: str, description: str) -> None:
        st.toast(f"**{title}** {description}", icon="✅")
