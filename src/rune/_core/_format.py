import re

_ADDRESS = re.compile(r"( at|:) 0x[0-9a-fA-F]+")
_ESCAPES = {'"': '\\"', "\\": "\\\\", "\n": "\\n", "\t": "\\t", "\r": "\\r"}


def strip_address(obj: object) -> str:
    """Render `obj` with its `repr`, minus any memory address.

    ```python
    >>> from rune._core import strip_address
    >>> def double(x):
    ...     return x * 2
    >>> strip_address(double)
    '<function double>'
    >>> strip_address([1, "a"])
    "[1, 'a']"

    ```
    """
    return _ADDRESS.sub("", repr(obj))


def render(name: str, *operands: object) -> str:
    """Render a combinator as `Name[operand, ...]`, operands address-stripped."""
    return f"{name}[{', '.join(strip_address(op) for op in operands)}]"


def quote(text: str) -> str:
    """Double-quote `text`, escaping quotes, backslashes and control characters.

    ```python
    >>> from rune._core import quote
    >>> print(quote('a\\tb "c"'))
    "a\\tb \\"c\\""

    ```
    """
    escaped = "".join(
        _ESCAPES.get(char, char if char.isprintable() else f"\\x{ord(char):02x}")
        for char in text
    )
    return f'"{escaped}"'
