# ui/encoding_page.py
from __future__ import annotations

import json
from typing import Callable

import streamlit as st

from core.text_utils import EmptyInputError
from core.encoding_utils import (
    DecodeError,
    JwtError,
    base64_encode, base64_decode,
    url_encode, url_decode,
    format_json, minify_json,
    decode_jwt, encode_jwt, verify_jwt,
)

_SAMPLE_TEXT = "Hello, DevTools Hub! This is a sample text for Base64 encoding demonstration."
_SAMPLE_URL = "https://example.com/search?q=hello world&category=development tools"
_SAMPLE_JWT = (
    "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9."
    "eyJzdWIiOiIxMjM0NTY3ODkwIiwibmFtZSI6IkpvaG4gRG9lIiwiaWF0IjoxNTE2MjM5MDIyfQ."
    "SflKxwRJSMeKKF2QT4fwpMeJf36POk6yJV_adQssw5c"
)
_SAMPLE_HEADER = '{\n  "alg": "HS256",\n  "typ": "JWT"\n}'
_SAMPLE_PAYLOAD = '{\n  "sub": "1234567890",\n  "name": "John Doe",\n  "iat": 1516239022\n}'


def _run(fn: Callable[[str], str], text: str) -> str | None:
    """Call an encoder and surface its input errors on the page."""
    try:
        return fn(text)
    except EmptyInputError as e:
        st.warning(str(e))
    except (DecodeError, JwtError) as e:
        st.error(str(e))
    return None


# ---------------- Tabs ----------------
def _codec_tab(key: str, sample: str, encode: Callable[[str], str], decode: Callable[[str], str]) -> None:
    mode = st.radio("Mode", ["Encode", "Decode"], horizontal=True, key=f"{key}_mode")
    with st.form(f"f_{key}"):
        text = st.text_area("Input", value=sample if mode == "Encode" else "", height=150, key=f"{key}_in_{mode.lower()}")
        ok = st.form_submit_button(mode)
    if ok:
        out = _run(encode if mode == "Encode" else decode, text)
        if out is not None:
            st.code(out, language=None)


def _json_tab() -> None:
    with st.form("f_json"):
        text = st.text_area("Input JSON", value="", height=200, placeholder='{"key": "value"}')
        c1, c2 = st.columns(2)
        fmt = c1.form_submit_button("Format")
        mini = c2.form_submit_button("Minify")
    if fmt or mini:
        out = _run(format_json if fmt else minify_json, text)
        if out is not None:
            st.success("Valid JSON")
            st.code(out, language="json")


def _jwt_decode() -> None:
    with st.form("f_jwt_dec"):
        token = st.text_area("JWT Token", value=_SAMPLE_JWT, height=120)
        secret = st.text_input("Secret (optional, to verify signature)", type="password")
        ok = st.form_submit_button("Decode")
    if ok:
        try:
            header, payload = decode_jwt(token)
        except EmptyInputError as e:
            st.warning(str(e))
            return
        except JwtError as e:
            st.error(f"Invalid: {e}")
            return
        st.markdown("**Header**")
        st.code(json.dumps(header, indent=2, ensure_ascii=False), language="json")
        st.markdown("**Payload**")
        st.code(json.dumps(payload, indent=2, ensure_ascii=False), language="json")
        if secret:
            try:
                valid = verify_jwt(token, secret)
            except JwtError as e:
                st.warning(str(e))
            else:
                if valid:
                    st.success("Signature verified")
                else:
                    st.error("Invalid signature")


def _jwt_encode() -> None:
    with st.form("f_jwt_enc"):
        header = st.text_area("Header", value=_SAMPLE_HEADER, height=120)
        payload = st.text_area("Payload", value=_SAMPLE_PAYLOAD, height=150)
        secret = st.text_input("Secret", value="your-256-bit-secret", type="password")
        ok = st.form_submit_button("Encode")
    if ok:
        try:
            st.code(encode_jwt(header, payload, secret), language=None)
        except JwtError as e:
            st.error(str(e))


# ---------------- Page ----------------
def render() -> None:
    st.subheader("🔁 Encoders & Formatters")

    tab1, tab2, tab3, tab4 = st.tabs(["Base64", "URL", "JSON", "JWT"])
    with tab1:
        _codec_tab("b64", _SAMPLE_TEXT, base64_encode, base64_decode)
    with tab2:
        _codec_tab("url", _SAMPLE_URL, url_encode, url_decode)
    with tab3:
        _json_tab()
    with tab4:
        t_dec, t_enc = st.tabs(["Decode JWT", "Encode JWT"])
        with t_dec:
            _jwt_decode()
        with t_enc:
            _jwt_encode()


# Keep a callable for other modules
main = render

if __name__ == "__main__":
    render()
