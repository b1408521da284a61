"""Quote-aware splitting of a where expression into top-level clauses."""

from typing import List

QUOTE_CHARS = ("'", '"')
ESCAPE_CHAR = "\\"
AND_TOKEN = " and"


def _is_and_token(text: str, i: int) -> bool:
    # " and" must be followed by whitespace or end of input; "Name eq Andy" stays whole
    if text[i:i + len(AND_TOKEN)].lower() != AND_TOKEN:
        return False
    end = i + len(AND_TOKEN)
    return end == len(text) or text[end].isspace()


def split_conditions(where: str) -> List[str]:
    """Split ``where`` on ``" and "`` (any case) outside quoted literals.

    A quote character opens a literal when none is open and closes it when
    it matches the opening one; a quote preceded by a backslash is ignored.
    Clauses are trimmed. Unbalanced quotes are not detected here.

    Args:
        where: Raw boolean expression.

    Returns:
        Ordered list of clause strings (at least one element).
    """
    clauses: List[str] = []
    current: List[str] = []
    in_quote = False
    quote_char = ""

    i = 0
    while i < len(where):
        char = where[i]
        if char in QUOTE_CHARS and (i == 0 or where[i - 1] != ESCAPE_CHAR):
            if not in_quote:
                in_quote = True
                quote_char = char
            elif char == quote_char:
                in_quote = False

        if not in_quote and _is_and_token(where, i):
            clauses.append("".join(current).strip())
            current = []
            i += len(AND_TOKEN)
            continue

        current.append(char)
        i += 1

    clauses.append("".join(current).strip())
    return clauses
