from dataclasses import dataclass


@dataclass(frozen=True)
class GoodSuffixTable:
    """
    Boyer-Moore good-suffix shift table.

    Attributes:
        pattern: The pattern the table was built for
        shifts: m + 1 shift amounts. shifts[0] applies after a full match,
                shifts[j + 1] after a mismatch at pattern index j
        border_positions: Border array from the first pass, kept for inspection
    """

    pattern: str
    shifts: tuple[int, ...]
    border_positions: tuple[int, ...]

    def after_match(self) -> int:
        """Shift to apply once the whole pattern matched."""
        return self.shifts[0]

    def after_mismatch(self, pattern_index: int) -> int:
        """Shift to apply after a mismatch at pattern_index during the right-to-left scan."""
        return self.shifts[pattern_index + 1]

    def __getitem__(self, index: int) -> int:
        return self.shifts[index]

    def __len__(self) -> int:
        return len(self.shifts)


def build_good_suffix_table(pattern: str) -> GoodSuffixTable:
    """
    Build the good-suffix shift table with the two-pass border method.

    The first pass walks the pattern right to left, recording for every suffix
    the start of its widest border and filling shifts for suffixes whose border
    cannot be extended. The second pass fills the remaining entries from the
    widest border of the whole pattern.

    Args:
        pattern: Pattern to preprocess (length >= 1)

    Returns:
        A GoodSuffixTable with m + 1 entries
    """
    m = len(pattern)
    # m doubles as the "unset" sentinel
    shift = [m] * (m + 1)
    border_pos = [0] * (m + 1)

    i, j = m, m + 1
    border_pos[i] = j
    while i > 0:
        while j <= m and pattern[i - 1] != pattern[j - 1]:
            if shift[j] == m:
                shift[j] = j - i
            j = border_pos[j]
        i -= 1
        j -= 1
        border_pos[i] = j

    j = border_pos[0]
    for i in range(m + 1):
        if shift[i] == m:
            shift[i] = j
        if i == j:
            j = border_pos[j]

    return GoodSuffixTable(
        pattern=pattern, shifts=tuple(shift), border_positions=tuple(border_pos)
    )
