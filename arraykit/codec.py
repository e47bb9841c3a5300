"""Length-prefixed encoding of a list of strings into one string."""

from __future__ import annotations

from collections.abc import Iterable

_DELIMITER = "#"


def encode(strs: Iterable[str]) -> str:
    """Encode strings as ``<length>#<text>`` records joined together."""
    return "".join(f"{len(text)}{_DELIMITER}{text}" for text in strs)


def decode(data: str) -> list[str]:
    """Decode a string produced by :func:`encode`.

    Raises ValueError if the data is not a sequence of well-formed records.
    """
    result: list[str] = []
    position = 0
    while position < len(data):
        marker = data.find(_DELIMITER, position)
        if marker == -1:
            raise ValueError(f"missing delimiter after offset {position}")
        length_text = data[position:marker]
        if not length_text.isascii() or not length_text.isdigit():
            raise ValueError(f"invalid length field {length_text!r} at offset {position}")
        length = int(length_text)
        start = marker + 1
        end = start + length
        if end > len(data):
            raise ValueError(
                f"record at offset {position} declares {length} characters "
                f"but only {len(data) - start} remain"
            )
        result.append(data[start:end])
        position = end
    return result