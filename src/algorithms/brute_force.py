def brute_force_matches(text: str, pattern: str) -> list[int]:
    """Every start offset where pattern occurs in text, by checking each window."""
    n, m = len(text), len(pattern)
    matches = []
    for i in range(n - m + 1):
        j = 0
        while j < m and text[i + j] == pattern[j]:
            j += 1
        if j == m:
            matches.append(i)
    return matches
