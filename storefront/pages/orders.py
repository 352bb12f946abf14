"""
Order pages. Only reachable once signed in.
"""
import streamlit as st

from storefront.components.sidebar import render_sidebar


def render_place_order():
    render_sidebar()
    st.title("Place Your Order")
    st.write("Choose your items and we'll take it from there.")


def render_checkout():
    render_sidebar()
    st.title("Checkout")
    st.write("Review your order before paying.")


def render_orders():
    render_sidebar()
    st.title("My Orders")
    st.write("Your past orders will show up here.")
