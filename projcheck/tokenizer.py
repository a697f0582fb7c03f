"""Logic for splitting name segments into words and their separators."""

import re

SEPARATORS = ("_", "-", ".", " ")

# Matched against the case shape of a name (see _case_shape), not the name itself
CAMEL_WORD_RE = re.compile(r"A+(?!a)|Aa*|a+|0+|-+")
CAMEL_BOUNDARY_RE = re.compile(r"[a0]A")

SEPARATOR_NAMES = {
    "_": "underscore",
    "-": "hyphen",
    ".": "dot",
    " ": "space",
}


class Tokenizer:
    """Splits separated and camelCase names into words."""

    def __init__(self, separators: tuple[str, ...] = SEPARATORS) -> None:
        """Initialize the tokenizer with the characters treated as separators."""
        self.separators = separators
        self._split_re = re.compile("[" + re.escape("".join(separators)) + "]+")

    def separators_in(self, text: str) -> set[str]:
        """Return the distinct separator characters used in a name segment."""
        return {ch for ch in text if ch in self.separators}

    def tokenize(self, text: str) -> list[str]:
        """Split a name segment into words.

        Separator runs delimit words; inside each piece camelCase and
        acronym boundaries delimit words too ("loadRawData" -> load/Raw/Data).
        Letters outside ASCII count by their case ("Données" is one word).
        """
        words: list[str] = []
        for part in self._split_re.split(text):
            if part:
                words.extend(self._split_camel_case(part))
        return words

    def is_camel_case(self, text: str) -> bool:
        """Check if a separator-free segment joins words by case changes."""
        if self.separators_in(text):
            return False
        return bool(CAMEL_BOUNDARY_RE.search(_case_shape(text)))

    def _split_camel_case(self, text: str) -> list[str]:
        # Acronym runs, TitleCase words, lowercase runs, digit runs, then the rest
        return [
            text[m.start() : m.end()]
            for m in CAMEL_WORD_RE.finditer(_case_shape(text))
        ]


def _case_shape(text: str) -> str:
    """Map each character to A (upper), a (other letter), 0 (digit) or -."""
    shape = []
    for ch in text:
        if ch.isupper():
            shape.append("A")
        elif ch.isalpha():
            shape.append("a")
        elif ch.isdigit():
            shape.append("0")
        else:
            shape.append("-")
    return "".join(shape)
