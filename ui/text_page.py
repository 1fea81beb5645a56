# ui/text_page.py
from __future__ import annotations

import pandas as pd
import streamlit as st

from core.text_utils import TRANSFORMATIONS, EmptyInputError, transform_all


def render() -> None:
    st.subheader("🔤 Text Case Converter")

    with st.form("f_text"):
        text = st.text_area("Input Text", value="", height=150, placeholder="Enter your text here...")
        ok = st.form_submit_button("Transform")
    if not ok:
        return

    try:
        results = transform_all(text)
    except EmptyInputError as e:
        st.warning(str(e))
        return

    df = pd.DataFrame(
        [{"Format": TRANSFORMATIONS[name][0], "Result": value} for name, value in results.items()]
    ).set_index("Format")
    st.dataframe(df, use_container_width=True)


# Keep a callable for other modules
main = render

if __name__ == "__main__":
    render()
