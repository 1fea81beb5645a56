# core/encoding_utils.py
from __future__ import annotations
import re, json, hmac, base64, hashlib, binascii, logging
from typing import Any, Tuple
from urllib.parse import quote, unquote

from core.text_utils import EmptyInputError

logger = logging.getLogger(__name__)


class DecodeError(ValueError):
    pass


class JwtError(ValueError):
    pass


def _require(text: str, message: str) -> None:
    if not text or not text.strip():
        raise EmptyInputError(message)


# --------- Base64 ---------
def base64_encode(text: str) -> str:
    _require(text, "Please enter text to encode.")
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def base64_decode(text: str) -> str:
    _require(text, "Please enter Base64 text to decode.")
    s = "".join(text.split())
    if len(s) % 4 == 1:
        raise DecodeError("Invalid Base64 input: wrong length.")
    s += "=" * (-len(s) % 4)
    try:
        raw = base64.b64decode(s, validate=True)
    except binascii.Error as e:
        raise DecodeError(f"Invalid Base64 input: {e}") from e
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecodeError("Decoded bytes are not valid UTF-8 text.") from e


# --------- URL ---------
# Same unreserved set as encodeURIComponent
_URI_SAFE = "-_.!~*'()"
_BAD_PERCENT = re.compile(r"%(?![0-9A-Fa-f]{2})")


def url_encode(text: str) -> str:
    _require(text, "Please enter a URL to encode.")
    try:
        return quote(text, safe=_URI_SAFE, encoding="utf-8", errors="strict")
    except UnicodeEncodeError as e:
        raise DecodeError(f"Text cannot be encoded as UTF-8: {e}") from e


def url_decode(text: str) -> str:
    _require(text, "Please enter a URL to decode.")
    if _BAD_PERCENT.search(text):
        raise DecodeError("Malformed percent-encoding in URL.")
    try:
        return unquote(text, encoding="utf-8", errors="strict")
    except UnicodeDecodeError as e:
        raise DecodeError("Percent-encoded bytes are not valid UTF-8.") from e


# --------- JSON ---------
def _parse_json(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise DecodeError(f"Invalid JSON: {e}") from e


def format_json(text: str, indent: int = 2) -> str:
    _require(text, "Please enter some JSON to format.")
    return json.dumps(_parse_json(text), indent=indent, ensure_ascii=False)


def minify_json(text: str) -> str:
    _require(text, "Please enter some JSON to minify.")
    return json.dumps(_parse_json(text), separators=(",", ":"), ensure_ascii=False)


# --------- JWT (HS256 only) ---------
def _b64url_encode(raw: bytes) -> str:
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode("ascii")


def _b64url_decode(part: str) -> bytes:
    try:
        return base64.urlsafe_b64decode(part + "=" * (-len(part) % 4))
    except (binascii.Error, ValueError) as e:
        raise JwtError(f"Invalid base64url segment: {e}") from e


def _split_token(token: str) -> Tuple[str, str, str]:
    parts = token.strip().split(".")
    if len(parts) != 3:
        raise JwtError("Invalid JWT format. JWT should have 3 parts separated by dots.")
    return parts[0], parts[1], parts[2]


def _compact_json(obj: Any) -> bytes:
    return json.dumps(obj, separators=(",", ":"), ensure_ascii=False).encode("utf-8")


def _sign(signing_input: str, secret: str) -> str:
    mac = hmac.new(secret.encode("utf-8"), signing_input.encode("ascii"), hashlib.sha256)
    return _b64url_encode(mac.digest())


def decode_jwt(token: str) -> Tuple[Any, Any]:
    """Return (header, payload) as parsed JSON. The signature is not checked."""
    _require(token, "Please enter a JWT token to decode.")
    head, body, _ = _split_token(token)
    try:
        header = json.loads(_b64url_decode(head).decode("utf-8"))
        payload = json.loads(_b64url_decode(body).decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise JwtError(f"Invalid JWT segment: {e}") from e
    return header, payload


def encode_jwt(header_json: str, payload_json: str, secret: str) -> str:
    try:
        header = json.loads(header_json)
        payload = json.loads(payload_json)
    except json.JSONDecodeError as e:
        raise JwtError(f"Invalid JSON in header or payload: {e}") from e
    if not isinstance(header, dict):
        raise JwtError("JWT header must be a JSON object.")
    if header.get("alg") != "HS256":
        raise JwtError(f"Only HS256 signing is supported, got alg={header.get('alg')!r}.")

    signing_input = f"{_b64url_encode(_compact_json(header))}.{_b64url_encode(_compact_json(payload))}"
    logger.debug("Signed JWT with %d-byte payload", len(signing_input))
    return f"{signing_input}.{_sign(signing_input, secret)}"


def verify_jwt(token: str, secret: str) -> bool:
    _require(token, "Please enter a JWT token to verify.")
    head, body, sig = _split_token(token)
    header, _ = decode_jwt(token)
    if not isinstance(header, dict) or header.get("alg") != "HS256":
        raise JwtError("Only HS256 tokens can be verified.")
    if not sig.isascii():
        return False
    return hmac.compare_digest(_sign(f"{head}.{body}", secret), sig)
