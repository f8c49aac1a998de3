"""
Summary: RichHandler subclass that relativizes or abbreviates ``path`` record extras.
Why: Keep log lines about deep paths readable in narrow terminals.
"""

from __future__ import annotations

import logging
from typing import Final, override

from rich.logging import RichHandler
from rich.text import Text

from crosspath.features.segments.domain.path import Path

ELLIPSIS: Final[str] = "…"
DEFAULT_KEEP_SEGMENTS: Final[int] = 4


class PathRichHandler(RichHandler):
    """Render ``record.path`` relative to ``record.base_path`` when possible.

    Records without a ``path`` extra render exactly like ``RichHandler``.
    """

    def __init__(self, *args: object, keep_segments: int = DEFAULT_KEEP_SEGMENTS, **kwargs: object) -> None:
        super().__init__(*args, **kwargs)  # pyright: ignore[reportArgumentType]
        self.keep_segments: int = keep_segments

    def format_path(self, raw: str, base: str | None = None) -> str:
        """Return ``raw`` relative to ``base``, or abbreviated when it is long."""
        path = Path(raw)
        if base:
            base_path = Path(base)
            if path.starts_with(base_path) and len(path) > len(base_path):
                return path.relative_to(base_path, no_leading_dot=True).to_string()

        if path.is_absolute() and len(path) > self.keep_segments + 1:
            tail = Path.from_segments(list(path.segments[-self.keep_segments :]), path.separator)
            return f"{ELLIPSIS}{path.separator}{tail.to_string()}"
        return path.to_string()

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> Text:
        rendered = super().render_message(record, message)
        if not isinstance(rendered, Text):
            rendered = Text(message)
        raw = getattr(record, "path", None)
        if not isinstance(raw, str):
            return rendered

        base = getattr(record, "base_path", None)
        label = self.format_path(raw, base if isinstance(base, str) else None)
        text = Text.assemble(rendered, " ") if rendered.plain else Text()
        text.append(label, style="white")
        return text


__all__ = ["PathRichHandler"]
