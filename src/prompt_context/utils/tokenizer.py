# src/prompt_context/utils/tokenizer.py
import math
from functools import lru_cache

import tiktoken

DEFAULT_ENCODING = "cl100k_base"


def estimate_tokens(text: str) -> int:
    """Rough token estimate: one token per four characters, rounded up."""
    return math.ceil(len(text) / 4)


def count_tokens(text: str, encoding_name: str = DEFAULT_ENCODING) -> int:
    """Exact token count for the bundle, for when the estimate is not enough."""
    return len(_encoding(encoding_name).encode(text))


@lru_cache(maxsize=None)
def _encoding(name: str) -> tiktoken.Encoding:
    return tiktoken.get_encoding(name)
