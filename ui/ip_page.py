# ui/ip_page.py
from __future__ import annotations

import pandas as pd
import streamlit as st

from core.network_utils import get_public_ips, request_info


def _table(data: dict) -> None:
    df = pd.DataFrame([data]).T
    df.columns = ["Value"]
    st.dataframe(df, use_container_width=True)


def render() -> None:
    st.subheader("🌐 IP Address Checker")

    if st.button("🔄 Refresh"):
        st.toast("Information refreshed")

    with st.spinner("Looking up public IP..."):
        ips = get_public_ips()

    st.markdown("**Public IP**")
    if not ips.found:
        st.error("Failed to fetch IP address")
    _table({
        "IPv4": ips.ipv4 or "Not available",
        "IPv6": ips.ipv6 or "Not available",
    })

    st.markdown("**Browser**")
    _table(request_info(st.context.headers))


# Keep a callable for other modules
main = render

if __name__ == "__main__":
    render()
