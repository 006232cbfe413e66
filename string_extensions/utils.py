from typing import Optional


class SuffixError(Exception):
    message = "suffix error"

    def __init__(self, message: str = None, *args, **kwargs):
        self.message = message or self.message

    def __str__(self) -> str:
        return self.message


def check_char(char) -> str:
    if not isinstance(char, str) or len(char) != 1:
        raise SuffixError(f"{char!r} is not a single character")
    return char


def remove_suffix(s: Optional[str], char: str) -> Optional[str]:
    """Drop the last character of ``s`` if it equals ``char``.

    Empty and ``None`` inputs are returned as is. Characters are compared
    by code point, so at most one trailing character is removed per call.
    """
    check_char(char)
    if not s:
        return s
    if s.endswith(char):
        return s[:-1]
    return s
