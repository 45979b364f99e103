"""Quote-aware word splitting and quote removal."""


def split_words(text: str, sep: str = " ") -> list:
    """Split text on sep, keeping quoted sections (quotes included) inside words.

    Runs of separators produce no empty words. Raises ValueError if a
    quote is left open.
    """
    words = []
    current = []
    quote = None
    for char in text:
        if quote:
            current.append(char)
            if char == quote:
                quote = None
        elif char in ("'", '"'):
            quote = char
            current.append(char)
        elif char == sep:
            if current:
                words.append("".join(current))
                current = []
        else:
            current.append(char)
    if quote:
        raise ValueError(f"unclosed quote {quote} in {text!r}")
    if current:
        words.append("".join(current))
    return words


def remove_quotes(word: str) -> str:
    """Strip the quotes that delimit quoted sections; an unclosed quote is dropped."""
    out = []
    quote = None
    for char in word:
        if quote:
            if char == quote:
                quote = None
            else:
                out.append(char)
        elif char in ("'", '"'):
            quote = char
        else:
            out.append(char)
    return "".join(out)