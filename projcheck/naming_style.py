"""Logic for classifying the word-separation convention of a name."""

from projcheck.tokenizer import SEPARATOR_NAMES, Tokenizer

SINGLE_WORD = "single-word"
MIXED = "mixed"
CAMEL_CASE = "camelCase"


def naming_style(segment: str, tokenizer: Tokenizer | None = None) -> str:
    """Return the convention a name segment uses to join its words.

    One of the separator names ("underscore", "hyphen", "dot", "space"),
    "camelCase", "single-word", or "mixed" when more than one separator
    appears.
    """
    tokenizer = tokenizer or Tokenizer()
    used = tokenizer.separators_in(segment.strip("".join(tokenizer.separators)))
    if len(used) > 1:
        return MIXED
    if used:
        return SEPARATOR_NAMES[used.pop()]
    if tokenizer.is_camel_case(segment):
        return CAMEL_CASE
    return SINGLE_WORD


def is_snake_case(name: str) -> bool:
    """Check if an identifier is lower snake_case."""
    if not name or not name[0].isalpha():
        return False
    return name == name.lower() and all(ch.isalnum() or ch == "_" for ch in name)
