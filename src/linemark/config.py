"""ContextVar-based tokenizer configuration for linemark.

Provides thread-local configuration using Python's ContextVars (PEP 567).
A Tokenizer reads the active config once, when it is constructed.

Usage:
    from linemark.config import TokenizerConfig, tokenizer_config_context

    with tokenizer_config_context(TokenizerConfig(strikethrough_enabled=False)):
        tokenizer = Tokenizer()

    # Or pass it explicitly
    tokenizer = Tokenizer(config=TokenizerConfig(persist_code_blocks=False))

"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields
from typing import Any

from linemark.errors import ConfigError


@dataclass(frozen=True, slots=True)
class TokenizerConfig:
    """Immutable tokenizer configuration.

    Attributes:
        strikethrough_enabled: Treat ``~`` as an inline delimiter
        persist_code_blocks: Keep code block mode across set_line calls.
            When False every line starts fresh (the per-line variant).

    """

    strikethrough_enabled: bool = True
    persist_code_blocks: bool = True

    def __post_init__(self) -> None:
        for f in fields(self):
            if not isinstance(getattr(self, f.name), bool):
                raise ConfigError("expected a bool", key=f.name)

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any], *, strict: bool = False) -> TokenizerConfig:
        """Create TokenizerConfig from dictionary.

        Unknown keys are ignored unless ``strict`` is set.

        Args:
            config_dict: Mapping with keys matching TokenizerConfig attributes.
            strict: Raise ConfigError on unknown keys instead of ignoring them.

        Returns:
            New TokenizerConfig instance with values from dict.

        Raises:
            ConfigError: On unknown keys (strict mode) or non-bool values.

        Example:
            >>> config = TokenizerConfig.from_dict({
            ...     "strikethrough_enabled": False,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.strikethrough_enabled
            False

        """
        valid_fields = {f.name for f in fields(cls)}
        if strict:
            unknown = sorted(k for k in config_dict if k not in valid_fields)
            if unknown:
                raise ConfigError("unknown configuration key", key=unknown[0])
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: TokenizerConfig = TokenizerConfig()

_tokenizer_config: ContextVar[TokenizerConfig] = ContextVar(
    "tokenizer_config",
    default=_DEFAULT_CONFIG,
)


def get_tokenizer_config() -> TokenizerConfig:
    """Get current tokenizer configuration (context-local)."""
    return _tokenizer_config.get()


def set_tokenizer_config(config: TokenizerConfig) -> None:
    """Set tokenizer configuration for current context.

    Args:
        config: TokenizerConfig instance to use for this context.

    """
    _tokenizer_config.set(config)


def reset_tokenizer_config() -> None:
    """Reset to default configuration."""
    _tokenizer_config.set(_DEFAULT_CONFIG)


@contextmanager
def tokenizer_config_context(config: TokenizerConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: TokenizerConfig to use within the context.

    Yields:
        None

    Thread Safety:
        Only affects the current context. Restores the previous
        config even if an exception is raised.

    """
    previous = _tokenizer_config.get()
    _tokenizer_config.set(config)
    try:
        yield
    finally:
        _tokenizer_config.set(previous)


__all__ = [
    "TokenizerConfig",
    "get_tokenizer_config",
    "reset_tokenizer_config",
    "set_tokenizer_config",
    "tokenizer_config_context",
]
