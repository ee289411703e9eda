"""String splitting helpers and the delimiters used in corpus and feature files."""

from __future__ import annotations

COLUMN_DELIMITER = "\t"
ATTRIBUTE_DELIMITER = "&"
KEYVALUE_DELIMITER = "="
VALUE_DELIMITER = ","
COMMENT_PREFIX = "#"


def split(text: str, delimiter: str = COLUMN_DELIMITER, max_parts: int = 0) -> list[str]:
    """Split ``text`` on ``delimiter``.

    When ``max_parts`` is positive, at most that many parts are produced and
    the last part holds the rest of the text unsplit. Empty text yields a
    single empty part, and a trailing delimiter yields a trailing empty part.
    """
    if not delimiter:
        raise ValueError("delimiter must not be empty")
    if max_parts < 0:
        raise ValueError("max_parts must not be negative")
    return text.split(delimiter, max_parts - 1 if max_parts > 0 else -1)


def split_to_key_value_map(
    text: str,
    delimiter: str = ATTRIBUTE_DELIMITER,
    kv_delimiter: str = KEYVALUE_DELIMITER,
) -> dict[str, str]:
    """Parse ``key=value&key=value`` text into a dict.

    Entries without a key/value delimiter are ignored; later keys override
    earlier ones.
    """
    result: dict[str, str] = {}
    if not text:
        return result
    for entry in split(text, delimiter):
        pair = split(entry, kv_delimiter, 2)
        if len(pair) == 2:
            key, value = pair
            result[key] = value
    return result