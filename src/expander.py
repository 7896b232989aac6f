""" Environment variable expansion. """
import string

NAME_CHARS = set(string.ascii_letters + string.digits + "_")


def expand_vars(text: str, env) -> str:
    """
    Replace every $NAME in text with env[NAME].

    NAME is the longest run of ASCII letters, digits and underscores after
    the '$'. Unknown names and a '$' with no name after it are kept as
    written. Substituted values are not scanned again.
    """
    result = []
    i = 0
    n = len(text)

    while i < n:
        if text[i] != "$":
            result.append(text[i])
            i += 1
            continue

        j = i + 1
        while j < n and text[j] in NAME_CHARS:
            j += 1
        name = text[i + 1:j]

        if name and name in env:
            result.append(env[name])
        else:
            result.append(text[i:j])
        i = j

    return "".join(result)
