"""ContextVar-based parse configuration for bbtree.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Config is set once per BBCode instance, read by every parser in the context.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    # In BBCode class
    bb = BBCode(max_nesting=16)
    html = bb("[b]Hello[/b]")  # Sets config internally via ContextVar

    # Direct parser usage (advanced)
    from bbtree.config import set_parse_config, reset_parse_config, ParseConfig

    set_parse_config(ParseConfig(max_nesting=16))
    try:
        segments = Parser(source).parse()
    finally:
        reset_parse_config()

    # Or use the context manager
    with parse_config_context(ParseConfig(max_nesting=16)):
        segments = Parser(source).parse()

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

from bbtree.colors import ColorResolver

DEFAULT_MAX_NESTING = 64


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable parse configuration.

    Set once per BBCode instance, read by all parsers in the context.
    Frozen dataclass ensures thread-safety (immutable after creation).

    Attributes:
        max_nesting: Deepest tag nesting that is still recognized. Tags that
            would open below this depth stay plain text. Keeps recursion
            well inside the interpreter's stack limit.
        max_source_length: Reject longer sources with SourceTooLargeError
            before parsing. None disables the check. Text scanning is
            quadratic in the worst case, so deployments taking untrusted
            input should set this.
        color_resolver: Maps a ``[color=name]`` name to an RGB triple or None.
            None means the CSS table from webcolors.

    """

    max_nesting: int = DEFAULT_MAX_NESTING
    max_source_length: int | None = None
    color_resolver: ColorResolver | None = None

    def __post_init__(self) -> None:
        if self.max_nesting < 0:
            msg = f"max_nesting must not be negative, got {self.max_nesting}"
            raise ValueError(msg)
        if self.max_source_length is not None and self.max_source_length < 0:
            msg = f"max_source_length must not be negative, got {self.max_source_length}"
            raise ValueError(msg)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ParseConfig":
        """Create ParseConfig from dictionary.

        Useful when config comes from external sources (CLI flags, YAML
        files, framework settings). Unknown keys are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                ParseConfig attribute names.

        Returns:
            New ParseConfig instance with values from dict.

        Example:
            >>> config = ParseConfig.from_dict({"max_nesting": 8, "unknown_key": 1})
            >>> config.max_nesting
            8

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ParseConfig = ParseConfig()

# Thread-local configuration via ContextVar
_parse_config: ContextVar[ParseConfig] = ContextVar(
    "parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get current parse configuration (thread-local).

    Returns:
        The active ParseConfig for this thread/context.

    """
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set parse configuration for current context.

    Args:
        config: ParseConfig instance to use for this context.

    """
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton, avoiding allocation.

    """
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Useful for tests and isolated parsing operations.

    Args:
        config: ParseConfig to use within the context.

    Yields:
        None

    Example:
        >>> with parse_config_context(ParseConfig(max_nesting=2)):
        ...     segments = Parser("[b][i][u]deep[/u][/i][/b]").parse()
        >>> # Automatically reset to previous config

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _parse_config.get()
    _parse_config.set(config)
    try:
        yield
    finally:
        _parse_config.set(previous)


__all__ = [
    "DEFAULT_MAX_NESTING",
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
]
