"""
String case formatting utilities.

Word boundaries are runs of whitespace, hyphens and underscores. Functions
that strip punctuation treat any non-word character as a separator.
"""

import random
import re
from typing import Optional

_SEPARATOR_RUN_RE = re.compile(r"[\s_-]+")
_NON_WORD_RE = re.compile(r"[^\w\s]")
_CAMEL_BOUNDARY_RE = re.compile(r"[\s_-]+(\w)")
_WORD_RE = re.compile(r"([^\W_])([^\W_]*)")
_CAPITALIZE_RE = re.compile(r"(?:^|\s)\S")

LEET_MAP = {
    "a": "4",
    "e": "3",
    "i": "1",
    "o": "0",
    "t": "7",
    "s": "5",
    "b": "8",
    "g": "9",
}


def _join_words(text: str, separator: str) -> str:
    """Punctuation to spaces, trim, then collapse every boundary run into separator."""
    words = _NON_WORD_RE.sub(" ", text).strip()
    return _SEPARATOR_RUN_RE.sub(separator, words)


def to_camel_case(text: str) -> str:
    """
    Uppercase the first character after each boundary run and drop the run.

    Example:
        >>> to_camel_case("hello_world")
        'helloWorld'
    """
    return _CAMEL_BOUNDARY_RE.sub(lambda m: m.group(1).upper(), text)


def to_snake_case(text: str) -> str:
    """
    Example:
        >>> to_snake_case("Hello World!")
        'hello_world'
    """
    return _join_words(text, "_").lower()


def to_pascal_case(text: str) -> str:
    """
    Example:
        >>> to_pascal_case("hello-world")
        'HelloWorld'
    """
    capitalized = _WORD_RE.sub(lambda m: m.group(1).upper() + m.group(2).lower(), text)
    return _SEPARATOR_RUN_RE.sub("", capitalized)


def to_kebab_case(text: str) -> str:
    """
    Example:
        >>> to_kebab_case("Hello World!")
        'hello-world'
    """
    return _join_words(text, "-").lower()


def to_capitalized_case(text: str) -> str:
    """Lowercase everything, then uppercase the first character of each whitespace-separated word."""
    return _CAPITALIZE_RE.sub(lambda m: m.group(0).upper(), text.lower())


def to_title_case(sentence: str) -> str:
    """
    Split on boundary runs, capitalize each word and join with spaces.

    Example:
        >>> to_title_case("hello-world_world")
        'Hello World World'
    """
    words = _SEPARATOR_RUN_RE.split(sentence)
    return " ".join(word[:1].upper() + word[1:].lower() for word in words)


def to_sentence_case(text: str) -> str:
    """First character uppercase, the rest lowercase."""
    return text[:1].upper() + text[1:].lower()


def to_constant_case(text: str) -> str:
    """
    Example:
        >>> to_constant_case("Hello World")
        'HELLO_WORLD'
    """
    return _join_words(text, "_").upper()


def to_path_case(text: str) -> str:
    """
    Example:
        >>> to_path_case("path_case")
        'path/case'
    """
    return _join_words(text, "/").lower()


def to_dot_case(text: str) -> str:
    """
    Example:
        >>> to_dot_case("JavaScript is fun")
        'javascript.is.fun'
    """
    return _join_words(text, ".").lower()


def to_alternating_case(text: str) -> str:
    """
    Lowercase at even positions, uppercase at odd ones. Spaces keep their
    position in the count.

    Example:
        >>> to_alternating_case("hello world")
        'hElLo wOrLd'
    """
    return "".join(
        char.lower() if index % 2 == 0 else char.upper()
        for index, char in enumerate(text)
    )


def to_inverse_case(text: str) -> str:
    """
    Flip the case of every character.

    Example:
        >>> to_inverse_case("Hello World")
        'hELLO wORLD'
    """
    return "".join(
        char.lower() if char == char.upper() else char.upper()
        for char in text
    )


def reverse_string(text: str) -> str:
    return text[::-1]


def to_leet_speak(text: str) -> str:
    """
    Substitute digits for letters; everything else is lowercased.

    Example:
        >>> to_leet_speak("JavaScript is cool")
        'j4v45cr1p7 15 c00l'
    """
    return "".join(LEET_MAP.get(char.lower(), char.lower()) for char in text)


def shuffle_string(text: str, rng: Optional[random.Random] = None) -> str:
    """
    Fisher-Yates shuffle of the characters of text.

    Args:
        text: String to shuffle
        rng: Random source (module-level random if omitted)
    """
    rng = rng or random
    chars = list(text)
    for i in range(len(chars) - 1, 0, -1):
        j = rng.randrange(i + 1)
        chars[i], chars[j] = chars[j], chars[i]
    return "".join(chars)
