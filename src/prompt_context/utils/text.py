# src/prompt_context/utils/text.py

BINARY_SNIFF_BYTES = 512


def is_binary(data: bytes) -> bool:
    """
    Null byte within the first 512 bytes means binary.
    Binary formats without an early null byte pass as text.
    """
    return b"\0" in data[:BINARY_SNIFF_BYTES]


def decode_text(data: bytes) -> str:
    """Best-effort UTF-8 decode; a leading BOM is dropped and malformed sequences become U+FFFD."""
    return data.decode("utf-8-sig", errors="replace")
