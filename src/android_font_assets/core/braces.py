def match_delimiter(text: str, open_index: int, opening: str = "{", closing: str = "}") -> int | None:
    """Return the index of the delimiter closing the one at ``open_index``.

    Delimiters inside string literals or comments are counted like any other.
    Returns None when the text ends before the depth drops back to zero.
    """
    depth = 1
    for i in range(open_index + 1, len(text)):
        char = text[i]
        if char == opening:
            depth += 1
        elif char == closing:
            depth -= 1
            if depth == 0:
                return i
    return None
