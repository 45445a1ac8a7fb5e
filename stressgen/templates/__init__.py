"""Query template token substitution."""

from .tokens import TOKEN_PATTERN, find_tokens, format_value, pick_param, token_map

__all__ = ["TOKEN_PATTERN", "find_tokens", "format_value", "pick_param", "token_map"]
