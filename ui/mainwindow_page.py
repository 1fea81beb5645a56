import streamlit as st

from core.config import APP_TITLE

TOOLS = [
    ("🔐 Password", "Strong random passwords with a strength estimate."),
    ("🔤 Text", "lowercase, UPPERCASE, Title Case, camelCase, snake_case, kebab-case."),
    ("🔁 Encoders", "Base64, URL encode/decode, JSON format/minify, JWT decode/encode."),
    ("🌐 IP Address", "Public IPv4/IPv6 and the browser's user agent and languages."),
]


def render():
    st.markdown(
        """
        <style>
          .hub-title{
            font-size: 48px;
            font-weight: 700;
            line-height: 1.1;
            margin: .2em 0 .1em 0;
          }
          @media (max-width: 768px){
            .hub-title{ font-size: 34px; }
          }
        </style>
        """,
        unsafe_allow_html=True,
    )
    st.markdown(f'<div class="hub-title">{APP_TITLE} 👋</div>', unsafe_allow_html=True)
    st.markdown("Small developer utilities. Nothing is stored.")

    for name, desc in TOOLS:
        st.markdown(f"- **{name}**: {desc}")

    st.info("Pick a tool in the **sidebar** to get started.")
