"""Parse configuration and render theme for roffhtml.

Parse configuration uses Python's ContextVars (PEP 567): it is set once per
``parse()`` call and read by the parser in that context. Presentation
parameters are an explicit ``Theme`` value handed to the renderer.

Usage:
    # Direct parser usage (advanced)
    from roffhtml.config import set_parse_config, reset_parse_config, ParseConfig

    set_parse_config(ParseConfig(strict_directives=True))
    try:
        doc = Parser(source).parse()
    finally:
        reset_parse_config()

    # Or use the context manager
    with parse_config_context(ParseConfig(strict_directives=True)):
        doc = Parser(source).parse()

"""

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any

DEFAULT_BACKGROUND = "220"
DEFAULT_TEXT = "220"
DEFAULT_ACCENT = "30"


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable parse configuration.

    Note: source_file is intentionally excluded; it's per-call state,
    not configuration. It remains on the Parser instance.

    Attributes:
        strict_directives: Raise UnrecognizedDirectiveError on unknown
            directives instead of logging a warning and dropping the line

    """

    strict_directives: bool = False

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> "ParseConfig":
        """Create ParseConfig from dictionary.

        Only includes keys that are valid ParseConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> ParseConfig.from_dict({"strict_directives": True, "x": 1})
            ParseConfig(strict_directives=True)

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


@dataclass(frozen=True, slots=True)
class Theme:
    """Presentation parameters for the HTML renderer.

    Every value is an opaque string emitted without validation. The color
    tokens are hue degrees written into CSS custom properties with a
    ``deg`` suffix; the stylesheet is embedded verbatim.

    Attributes:
        stylesheet: CSS text placed in its own <style> block
        background: Background hue token
        text: Text hue token
        accent: Accent hue token (links, headings)
        escape_html: Escape reserved characters in page content. Off by
            default, so body text passes through as raw markup.

    """

    stylesheet: str = ""
    background: str = DEFAULT_BACKGROUND
    text: str = DEFAULT_TEXT
    accent: str = DEFAULT_ACCENT
    escape_html: bool = False

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> "Theme":
        """Create Theme from dictionary, ignoring unknown keys.

        Color tokens given as numbers are converted to strings.

        Example:
            >>> Theme.from_dict({"accent": 120}).accent
            '120'

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        for key in ("background", "text", "accent"):
            if key in filtered:
                filtered[key] = str(filtered[key])
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ParseConfig = ParseConfig()

_parse_config: ContextVar[ParseConfig] = ContextVar(
    "parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get current parse configuration (thread-local)."""
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set parse configuration for current context.

    Thread Safety:
        Only affects the current thread's context. Other threads are unaffected.

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

    Restores the previous config even if an exception is raised.

    Example:
        >>> with parse_config_context(ParseConfig(strict_directives=True)):
        ...     get_parse_config().strict_directives
        True

    """
    previous = _parse_config.get()
    _parse_config.set(config)
    try:
        yield
    finally:
        _parse_config.set(previous)


__all__ = [
    "DEFAULT_ACCENT",
    "DEFAULT_BACKGROUND",
    "DEFAULT_TEXT",
    "ParseConfig",
    "Theme",
    "get_parse_config",
    "parse_config_context",
    "reset_parse_config",
    "set_parse_config",
]
