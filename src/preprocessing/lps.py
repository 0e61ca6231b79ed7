from dataclasses import dataclass


@dataclass(frozen=True)
class LPSTable:
    """
    Longest-proper-prefix-which-is-also-suffix table for a KMP pattern.

    Attributes:
        pattern: The pattern the table was built for
        values: values[i] is the length of the longest proper border of pattern[0..i]
        log: Ordered description of every comparison and fallback made while building
    """

    pattern: str
    values: tuple[int, ...]
    log: tuple[str, ...]

    def __getitem__(self, index: int) -> int:
        return self.values[index]

    def __len__(self) -> int:
        return len(self.values)


def build_lps(pattern: str) -> LPSTable:
    """
    Build the KMP failure function for a non-empty pattern.

    Args:
        pattern: Pattern to preprocess (length >= 1)

    Returns:
        An LPSTable holding the border lengths and the preprocessing log
    """
    m = len(pattern)
    lps = [0] * m
    log: list[str] = []

    length = 0
    i = 1
    while i < m:
        log.append(
            f"Compare p[{i}]='{pattern[i]}' with p[{length}]='{pattern[length]}'"
        )
        if pattern[i] == pattern[length]:
            length += 1
            lps[i] = length
            log.append(f"Match -> lps[{i}] = {length}")
            i += 1
        elif length != 0:
            # i stays put, retry against the next shorter border
            length = lps[length - 1]
            log.append(f"Fallback len to {length}")
        else:
            lps[i] = 0
            log.append(f"Set lps[{i}] = 0")
            i += 1

    return LPSTable(pattern=pattern, values=tuple(lps), log=tuple(log))
