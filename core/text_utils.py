# core/text_utils.py
from __future__ import annotations
import re, logging
from typing import Callable, Dict, Tuple

logger = logging.getLogger(__name__)


class EmptyInputError(ValueError):
    pass


_WORD_RUN = re.compile(r"(?a:\w)\S*")
_CAMEL_HEAD = re.compile(r"(?:^\w|[A-Z]|\b\w)", re.ASCII)
_SPACES = re.compile(r"\s+")


def to_lowercase(text: str) -> str:
    return text.lower()


def to_uppercase(text: str) -> str:
    return text.upper()


def to_title_case(text: str) -> str:
    return _WORD_RUN.sub(lambda m: m.group(0)[0].upper() + m.group(0)[1:].lower(), text)


def to_camel_case(text: str) -> str:
    """'hello world' -> 'helloWorld'. Only word heads change case; the rest is kept."""
    heads = _CAMEL_HEAD.sub(
        lambda m: m.group(0).lower() if m.start() == 0 else m.group(0).upper(),
        text,
    )
    return _SPACES.sub("", heads)


def to_snake_case(text: str) -> str:
    return _SPACES.sub("_", text.lower())


def to_kebab_case(text: str) -> str:
    return _SPACES.sub("-", text.lower())


# name -> (label, fn), in display order
TRANSFORMATIONS: Dict[str, Tuple[str, Callable[[str], str]]] = {
    "lowercase": ("lowercase", to_lowercase),
    "uppercase": ("UPPERCASE", to_uppercase),
    "titlecase": ("Title Case", to_title_case),
    "camelcase": ("camelCase", to_camel_case),
    "snakecase": ("snake_case", to_snake_case),
    "kebabcase": ("kebab-case", to_kebab_case),
}


def transform_all(text: str) -> Dict[str, str]:
    if not text or not text.strip():
        raise EmptyInputError("Please enter some text to transform.")
    results = {name: fn(text) for name, (_, fn) in TRANSFORMATIONS.items()}
    logger.debug("Applied %d transformations to %d chars", len(results), len(text))
    return results
