"""Token serialization: JSON round-trip for linemark tokens.

Converts tokens to/from JSON-compatible dicts. Useful for:
- Dumping a document's token stream for inspection
- Golden-file comparisons in downstream tools

All output is deterministic (sorted keys).

Example:
    from linemark import tokenize
    from linemark.serialization import to_json, from_json

    lines = tokenize("# Hello **World**")
    assert from_json(to_json(lines)) == lines

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
from typing import Any

from linemark.tokens import Token, TokenType

# Serialized type names to TokenType for deserialization
_TOKEN_TYPES: dict[str, TokenType] = {t.name.lower(): t for t in TokenType}

# Types whose ``value`` field carries data
_VALUE_TYPES = frozenset({TokenType.LITERAL, TokenType.CODE_BLOCK})


def to_dict(token: Token) -> dict[str, Any]:
    """Convert a token to a JSON-compatible dict.

    Only the payload meaningful for the token's type is included:
    ``value`` for literal and code_block, ``level`` for header.

    Args:
        token: Any linemark Token.

    Returns:
        Dict with ``type`` and the type's payload.

    """
    result: dict[str, Any] = {"type": token.type.name.lower()}
    if token.type in _VALUE_TYPES:
        result["value"] = token.value
    elif token.type is TokenType.HEADER:
        result["level"] = token.level
    return result


def from_dict(data: dict[str, Any]) -> Token:
    """Reconstruct a token from a dict.

    Args:
        data: Dict with ``type`` and payload fields (as produced by to_dict).

    Returns:
        Token.

    Raises:
        ValueError: If ``data`` is not a dict, or ``type`` is missing,
            not a string, or unknown.

    """
    if not isinstance(data, dict):
        msg = f"Expected a serialized token dict, got {type(data).__name__}"
        raise ValueError(msg)

    type_name = data.get("type")
    if type_name is None:
        msg = "Missing 'type' field in serialized token"
        raise ValueError(msg)
    if not isinstance(type_name, str):
        msg = f"Token type must be a string, got {type(type_name).__name__}"
        raise ValueError(msg)

    token_type = _TOKEN_TYPES.get(type_name)
    if token_type is None:
        msg = f"Unknown token type: {type_name!r}"
        raise ValueError(msg)

    return Token(
        token_type,
        value=data.get("value", ""),
        level=data.get("level", 0),
    )


def to_json(lines: list[list[Token]], *, indent: int | None = None) -> str:
    """Serialize per-line token lists to a JSON string.

    Args:
        lines: One token list per input line (as returned by linemark.tokenize).
        indent: JSON indentation level (None for compact).

    Returns:
        JSON string.

    """
    payload = [[to_dict(token) for token in tokens] for tokens in lines]
    return json.dumps(payload, sort_keys=True, indent=indent)


def from_json(data: str) -> list[list[Token]]:
    """Deserialize per-line token lists from a JSON string.

    Raises:
        ValueError: If the JSON is not a list of lists of tokens.

    """
    raw = json.loads(data)
    if not isinstance(raw, list) or not all(isinstance(line, list) for line in raw):
        msg = "Expected a list of token lists"
        raise ValueError(msg)
    return [[from_dict(item) for item in line] for line in raw]
