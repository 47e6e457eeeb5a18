"""Rich console handler that renders path extras with styled separators.

Where: platform/logging/handlers.py
What: Format ``path_text`` log extras through the library's own parser.
Why: Keep handler formatting separate from logger bootstrap.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, ClassVar

from typing_extensions import override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text

if TYPE_CHECKING:
    from pathgrammar.shared.family import Family


class PathRichHandler(RichHandler):
    """Custom Rich handler that highlights path anchors and separators."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "parse.success": ("✅", "green"),
        "parse.error": ("⛔", "red"),
        "compare.start": ("🔎", "cyan"),
        "compare.divergence": ("❌", "red"),
        "compare.complete": ("✅", "green"),
        "bench.result": ("⏱️", "blue"),
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with custom settings.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str, family: str | None = None) -> Text:
        """Format a path with coloured anchor and separators.

        Args:
            path: Raw path text attached to the record.
            family: Family name used to parse ``path``; ``None`` guesses from the text.

        Returns:
            Text: Styled path, truncated to the trailing segments when long.
        """
        # Imported here: the grammar layers log through this package.
        from pathgrammar.features.value import parse
        from pathgrammar.shared.errors import PathGrammarError
        from pathgrammar.shared.family import Family

        resolved = Family.coerce(family) if family else self._guess_family(path)
        try:
            value = parse(path, resolved)
        except PathGrammarError:
            return Text(path, style=Style(color="white"))

        separator = resolved.separator
        anchor = value.anchor
        body_parts = [component.text for component in value.iter_components()]

        truncated = len(body_parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT :]

        text = Text()
        if anchor:
            _ = text.append(anchor, style=Style(color="cyan", bold=True))
        if truncated:
            _ = text.append("…", style=Style(color="magenta"))
            if body_parts:
                _ = text.append(separator, style=Style(color="magenta"))
        for index, part in enumerate(body_parts):
            if index:
                _ = text.append(separator, style=Style(color="magenta"))
            _ = text.append(part, style=Style(color="white"))
        if not text.plain:
            _ = text.append(".", style=Style(color="white"))
        return text

    @staticmethod
    def _guess_family(raw_path: str) -> Family:
        """Return the family a bare path string most likely belongs to."""
        from pathgrammar.shared.family import Family

        if "\\" in raw_path or (len(raw_path) >= 2 and raw_path[1] == ":"):
            return Family.WINDOWS
        return Family.POSIX

    def _render_event_message(self, record: logging.LogRecord, message: str) -> Text | None:
        """Render structured path events with dedicated styling."""

        event = getattr(record, "path_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))
        _ = text.append(message, style=Style(color=color))

        path_text = getattr(record, "path_text", None)
        if isinstance(path_text, str):
            _ = text.append(" @ ")
            _ = text.append_text(
                self._format_path(path_text, family=getattr(record, "path_family", None))
            )
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for path events."""

        event_text = self._render_event_message(record, message)
        if event_text is not None:
            return event_text

        return super().render_message(record, message)


__all__ = ["PathRichHandler"]
