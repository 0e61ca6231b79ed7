def comparison_grid(text: str, pattern: str) -> tuple[tuple[bool, ...], ...]:
    """Static n x m grid where grid[i][j] is text[i] == pattern[j]."""
    return tuple(tuple(t == p for p in pattern) for t in text)


def render_grid(text: str, pattern: str) -> str:
    """Plain-text rendering of the comparison grid, text rows by pattern columns."""
    grid = comparison_grid(text, pattern)
    header = "     " + " ".join(f"{p:>2}" for p in pattern)
    lines = [header]
    for i, row in enumerate(grid):
        cells = " ".join(" Y" if eq else " ." for eq in row)
        lines.append(f"{i:>3}{text[i]:>2} {cells}")
    return "\n".join(lines)
