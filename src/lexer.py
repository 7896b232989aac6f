""" Lexical analysis for shell commands. """


def tokenize(line: str) -> list[str]:
    """
    Split a command line into arguments.

    Double quotes group words and are dropped. A backslash before a double
    quote yields a literal quote; before anything else the backslash is kept
    along with the character. Unterminated quotes and a trailing backslash
    just end the scan.
    """
    tokens = []
    current = ""
    in_quotes = False
    escape = False

    for ch in line:
        if escape:
            current += ch if ch == '"' else "\\" + ch
            escape = False
        elif ch == "\\":
            escape = True
        elif ch == '"':
            in_quotes = not in_quotes
        elif ch == " " and not in_quotes:
            if current:
                tokens.append(current)
                current = ""
        else:
            current += ch

    if current:
        tokens.append(current)
    return tokens
