from typing import Iterator, Optional

from mimesis import Text
from mimesis.locales import Locale

ALPHABETS = {
    "dna": "ACGT",
    "binary": "01",
    "abc": "ABC",
}


class CorpusGenerator:
    """Generates texts and patterns for tracing and benchmarking using mimesis."""

    def __init__(self, locale: Locale = Locale.EN, seed: Optional[int] = None):
        self.text_provider = Text(locale=locale, seed=seed)
        self.random = self.text_provider.random

    def generate_text(self, length: int, kind: str = "words") -> str:
        """
        Generate a text of exactly length characters.

        Args:
            length: Number of characters to produce
            kind: "words" for natural language sentences, or the name of one
                  of ALPHABETS for uniformly random symbols

        Returns:
            The generated text
        """
        if length < 0:
            raise ValueError("Length cannot be negative")

        if kind == "words":
            parts: list[str] = []
            size = 0
            while size < length:
                sentence = self.text_provider.text(quantity=3)
                parts.append(sentence)
                size += len(sentence) + 1
            return " ".join(parts)[:length]

        if kind not in ALPHABETS:
            raise ValueError(f"Unknown text kind: {kind}")
        return "".join(self.random.choices(ALPHABETS[kind], k=length))

    def generate_pattern(
        self, text: str, length: int, present: bool = True, kind: str = "words"
    ) -> str:
        """
        Pick a pattern for text.

        Args:
            text: Text the pattern will be searched in
            length: Pattern length (>= 1)
            present: Take a slice of the text so at least one occurrence exists;
                     otherwise draw a pattern independent of it
            kind: Alphabet for independent patterns; "words" draws English
                  words, any ALPHABETS name draws random symbols from it

        Returns:
            The pattern
        """
        if length < 1:
            raise ValueError("Pattern length must be at least 1")

        if present and len(text) >= length:
            start = self.random.randint(0, len(text) - length)
            return text[start : start + length]

        if kind in ALPHABETS:
            return "".join(self.random.choices(ALPHABETS[kind], k=length))
        if kind != "words":
            raise ValueError(f"Unknown text kind: {kind}")

        word = ""
        while len(word) < length:
            word += self.text_provider.word()
        return word[:length]

    def generate_pairs(
        self,
        count: int,
        text_length: int,
        pattern_length: int,
        kind: str = "words",
        present: bool = True,
    ) -> Iterator[tuple[str, str]]:
        """Generate count (text, pattern) pairs."""
        for _ in range(count):
            text = self.generate_text(text_length, kind)
            yield text, self.generate_pattern(text, pattern_length, present, kind)
