# ui/password_page.py
from __future__ import annotations
import logging
import pandas as pd
import streamlit as st

from core.config import DEFAULT_PASSWORD_LENGTH, MAX_BATCH, PASSWORD_MIN_LENGTH, PASSWORD_MAX_LENGTH
from core.password_utils import (
    GenerationRequest,
    PasswordGenerationError,
    RandomSourceError,
    build_alphabet,
    generate_passwords,
    score_strength,
    entropy_bits,
)

logger = logging.getLogger(__name__)


def render() -> None:
    st.subheader("🔐 Strong Random Password Generator")

    colL, colR = st.columns([3, 2])
    with colL:
        length = st.slider("Password length", PASSWORD_MIN_LENGTH, PASSWORD_MAX_LENGTH, DEFAULT_PASSWORD_LENGTH, 1)
        count = st.number_input("Quantity", min_value=1, max_value=MAX_BATCH, value=1, step=1)
        show_plain = st.checkbox("Show characters (unmasked)", value=True)
    with colR:
        st.markdown("**Character sets**")
        use_lower = st.checkbox("Include lowercase letters → a b c d ...", value=True)
        use_upper = st.checkbox("Include uppercase letters → A B C D ...", value=True)
        use_digits = st.checkbox("Include numbers → 1 2 3 4 ...", value=True)
        use_symbols = st.checkbox("Include symbols → ! # $ % & * + - = ? @ ^ _", value=True)

        st.markdown("**Filters**")
        exclude_confusing = st.checkbox("Exclude confusing characters → i l L 1 o 0 O", value=False)
        exclude_ambiguous = st.checkbox("Exclude ambiguous characters → { } [ ] ( ) / \\ ' \" ` ; : . < >", value=False)

    gen = st.button("🎲 Generate", type="primary", use_container_width=True)
    if not gen:
        return

    try:
        request = GenerationRequest(
            length=int(length),
            include_lowercase=use_lower,
            include_uppercase=use_upper,
            include_numbers=use_digits,
            include_symbols=use_symbols,
            exclude_confusing=exclude_confusing,
            exclude_ambiguous=exclude_ambiguous,
        )
        alphabet = build_alphabet(request)
        passwords = generate_passwords(request, int(count), alphabet=alphabet)
    except RandomSourceError as e:
        logger.exception("Password generation aborted")
        st.error(f"Generation error: {e}")
        return
    except PasswordGenerationError as e:
        st.error(str(e))
        return

    bits = entropy_bits(request.length, len(alphabet))
    st.caption(f"Estimated entropy: **{bits:.1f} bits** (alphabet {len(alphabet)} chars)")

    rows = []
    strengths = [score_strength(p) for p in passwords]
    for p, strength in zip(passwords, strengths):
        rows.append({
            "Password": p if show_plain else "•" * len(p),
            "Strength": strength.label,
            "Score": f"{strength.score}/8",
        })

    if len(rows) == 1:
        st.code(rows[0]["Password"], language=None)
        st.progress(strengths[0].level / 5, text=f"Strength: {rows[0]['Strength']} ({rows[0]['Score']})")
    else:
        df = pd.DataFrame(rows, index=range(1, len(rows) + 1))
        st.dataframe(df, use_container_width=True)


# Keep a callable for other modules
main = render

if __name__ == "__main__":
    render()
