"""Page header with the signed-in user's initials."""
from __future__ import annotations
import streamlit as st

from core.utils import get_initials
from models.schema import User


def render_header(user: User) -> None:
    """Render the header row: product name on the left, user badge on the right."""
    col1, col2 = st.columns([4, 1])

    with col1:
        st.markdown("### Revenue")

    with col2:
        initials = get_initials(user.first_name, user.last_name)
        full_name = f"{user.first_name} {user.last_name}".strip() or "Unknown user"
        st.markdown(f"**{initials}** · {full_name}")
        if user.email:
            st.caption(user.email)
