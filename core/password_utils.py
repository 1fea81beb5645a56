# core/password_utils.py
from __future__ import annotations
import math, secrets, logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Tuple

from core.config import MAX_BATCH, PASSWORD_MIN_LENGTH, PASSWORD_MAX_LENGTH

logger = logging.getLogger(__name__)


class CharClass(Enum):
    LOWERCASE = "abcdefghijklmnopqrstuvwxyz"
    UPPERCASE = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    DIGITS = "0123456789"
    SYMBOLS = "!#$%&*+-=?@^_{}[]()/'\"`;:.<>\\"


# Canonical concatenation order
CANONICAL_ORDER: Tuple[CharClass, ...] = (
    CharClass.LOWERCASE,
    CharClass.UPPERCASE,
    CharClass.DIGITS,
    CharClass.SYMBOLS,
)

# Characters often confused visually
CONFUSING = frozenset("il1Lo0O")
# Punctuation easy to mistype when transcribed
AMBIGUOUS = frozenset("{}[]()/'\"`;:.<>\\")


# --------- Errors ---------
class PasswordGenerationError(Exception):
    """Base class for password generator failures."""


class NoClassSelectedError(PasswordGenerationError, ValueError):
    def __init__(self, message: str = "Please select at least one character type.") -> None:
        super().__init__(message)


class EmptyAlphabetError(PasswordGenerationError, ValueError):
    def __init__(self, message: str = "No characters available with current settings.") -> None:
        super().__init__(message)


class InvalidLengthError(PasswordGenerationError, ValueError):
    pass


class RandomSourceError(PasswordGenerationError, RuntimeError):
    pass


def _check_length(length: int) -> None:
    if isinstance(length, bool) or not isinstance(length, int):
        raise InvalidLengthError(f"Password length must be an integer, got {length!r}.")
    if not PASSWORD_MIN_LENGTH <= length <= PASSWORD_MAX_LENGTH:
        raise InvalidLengthError(
            f"Password length must be between {PASSWORD_MIN_LENGTH} and {PASSWORD_MAX_LENGTH}, got {length}."
        )


# --------- Request / result ---------
@dataclass(frozen=True)
class GenerationRequest:
    length: int = 16
    include_lowercase: bool = True
    include_uppercase: bool = True
    include_numbers: bool = True
    include_symbols: bool = True
    exclude_confusing: bool = False
    exclude_ambiguous: bool = False

    def __post_init__(self) -> None:
        _check_length(self.length)

    @property
    def classes(self) -> Tuple[CharClass, ...]:
        flags = {
            CharClass.LOWERCASE: self.include_lowercase,
            CharClass.UPPERCASE: self.include_uppercase,
            CharClass.DIGITS: self.include_numbers,
            CharClass.SYMBOLS: self.include_symbols,
        }
        return tuple(c for c in CANONICAL_ORDER if flags[c])


@dataclass(frozen=True)
class StrengthAssessment:
    score: int | None
    label: str
    level: int  # 0 = no password, 1..5 = Weak..Very Strong

    @property
    def is_empty(self) -> bool:
        return self.score is None


NO_PASSWORD = StrengthAssessment(score=None, label="No password", level=0)


# --------- Alphabet ---------
def build_alphabet(request: GenerationRequest) -> str:
    """
    Returns the characters eligible for sampling, unique and in canonical
    class order (lowercase, uppercase, digits, symbols).
    Raises NoClassSelectedError before looking at exclusions, then
    EmptyAlphabetError if the exclusions leave nothing.
    """
    classes = request.classes
    if not classes:
        raise NoClassSelectedError()

    removed: set[str] = set()
    if request.exclude_confusing:
        removed |= CONFUSING
    if request.exclude_ambiguous:
        removed |= AMBIGUOUS

    chars = "".join(c.value for c in classes)
    alphabet = "".join(dict.fromkeys(ch for ch in chars if ch not in removed))
    if not alphabet:
        raise EmptyAlphabetError()

    logger.debug(
        "Built alphabet of %d chars (classes=%s, exclude_confusing=%s, exclude_ambiguous=%s)",
        len(alphabet), [c.name for c in classes], request.exclude_confusing, request.exclude_ambiguous,
    )
    return alphabet


# --------- Sampling ---------
def secure_uint32() -> int:
    return secrets.randbits(32)


def sample_password(
    alphabet: str,
    length: int,
    rand_u32: Callable[[], int] = secure_uint32,
) -> str:
    """
    Draw 'length' characters, each alphabet[rand_u32() % len(alphabet)].
    The modulo bias toward low indices is accepted: it is negligible for
    alphabets this small against a 32-bit source.
    """
    if not alphabet:
        raise EmptyAlphabetError()
    _check_length(length)

    n = len(alphabet)
    try:
        indices = [rand_u32() % n for _ in range(length)]
    except (OSError, NotImplementedError) as e:
        logger.error("Secure random source failed: %s", e)
        raise RandomSourceError(f"Secure random source unavailable: {e}") from e
    return "".join(alphabet[i] for i in indices)


def generate_password(
    request: GenerationRequest,
    rand_u32: Callable[[], int] = secure_uint32,
) -> str:
    return sample_password(build_alphabet(request), request.length, rand_u32)


def generate_passwords(
    request: GenerationRequest,
    count: int,
    rand_u32: Callable[[], int] = secure_uint32,
    alphabet: str | None = None,
) -> List[str]:
    """
    Generate 'count' independent passwords against one alphabet.
    Pass 'alphabet' when the caller already built it for 'request', so the
    displayed alphabet and the one sampled from are the same object.
    """
    if not 1 <= count <= MAX_BATCH:
        raise ValueError(f"Quantity must be between 1 and {MAX_BATCH}, got {count}.")
    if alphabet is None:
        alphabet = build_alphabet(request)
    passwords = [sample_password(alphabet, request.length, rand_u32) for _ in range(count)]
    logger.info("Generated %d password(s) of length %d from %d chars", count, request.length, len(alphabet))
    return passwords


# --------- Strength ---------
def score_strength(password: str) -> StrengthAssessment:
    if not password:
        return NO_PASSWORD

    length = len(password)
    score = 0
    # Length tiers are cumulative
    if length >= 8: score += 1
    if length >= 12: score += 1
    if length >= 16: score += 1

    if any("a" <= c <= "z" for c in password): score += 1
    if any("A" <= c <= "Z" for c in password): score += 1
    if any("0" <= c <= "9" for c in password): score += 1
    if any(not (c.isascii() and c.isalnum()) for c in password): score += 1

    if len(set(password)) / length > 0.8: score += 1

    if score <= 2: return StrengthAssessment(score, "Weak", 1)
    if score <= 4: return StrengthAssessment(score, "Fair", 2)
    if score <= 6: return StrengthAssessment(score, "Good", 3)
    if score <= 7: return StrengthAssessment(score, "Strong", 4)
    return StrengthAssessment(score, "Very Strong", 5)


def entropy_bits(length: int, alphabet_size: int) -> float:
    if length <= 0 or alphabet_size <= 1:
        return 0.0
    return length * math.log2(alphabet_size)
