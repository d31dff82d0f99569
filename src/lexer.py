""" Lexical analysis for shell commands. """


def tokenize(line: str) -> list[str]:
    # no quoting or escapes: any run of whitespace separates tokens
    return line.split()
