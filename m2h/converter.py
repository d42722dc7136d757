"""
Markdown to HTML conversion for documentation pages.
"""
import logging
import threading
from pathlib import Path
from typing import Optional

from markdown_it import MarkdownIt
from mdit_py_plugins.deflist import deflist_plugin

from .legacy import replace_old_dl
from .localization import LocalizationError, NotePatterns
from .macros import decode_macros, encode_macros
from .markdown_plugins import macro_passthrough_plugin, notecard_plugin, renderers_plugin
from .models import DEFAULT_LOCALE, ProcessorOptions

logger = logging.getLogger(__name__)


class MarkdownConverter:
    """
    Markdown-it-py based converter with macro, notecard and fence support.
    """

    def __init__(self, note_patterns: Optional[NotePatterns] = None):
        """
        Initialize the converter.

        Args:
            note_patterns: Localized notecard label patterns. The process-wide
                patterns are loaded on first use when omitted.
        """
        self.markdown_processor = MarkdownIt('commonmark', {
            'html': True,          # Raw HTML passes through
            'linkify': False,
            'typographer': False,
        })
        self.markdown_processor.enable(['table', 'strikethrough'])

        # 1) deflist_plugin          : `Term\n:   definition` -> <dl>/<dt>/<dd>
        # 2) macro_passthrough_plugin: whole-line `{{...}}` placeholders stay out of <p>
        # 3) notecard_plugin         : `> **Note:** ...` blockquotes -> notecard divs
        # 4) renderers_plugin        : fence / macro / notecard / noop HTML
        self.markdown_processor = (
            self.markdown_processor
                .use(deflist_plugin)
                .use(macro_passthrough_plugin)
                .use(notecard_plugin, note_patterns)
                .use(renderers_plugin)
        )

    def convert(self, markdown_text: str, options: Optional[ProcessorOptions] = None) -> str:
        """
        Convert markdown text to HTML.

        Args:
            markdown_text: Raw markdown content
            options: Per-call options; only ``locale`` is consulted

        Returns:
            HTML string

        Raises:
            LocalizationError: If the localization data cannot be loaded
        """
        locale = options.locale if options and options.locale else DEFAULT_LOCALE

        dl_replaced = replace_old_dl(str(markdown_text))
        macro_encoded = encode_macros(dl_replaced)
        html_macro_encoded = self.markdown_processor.render(macro_encoded, {'locale': locale})
        return decode_macros(html_macro_encoded)


# Process-wide converter, built by the first call
_converter = None
_converter_lock = threading.Lock()


def get_converter() -> MarkdownConverter:
    """
    Get the global converter instance.

    Returns:
        MarkdownConverter instance
    """
    global _converter

    if _converter is None:
        with _converter_lock:
            if _converter is None:
                logger.debug("Building markdown converter")
                _converter = MarkdownConverter()

    return _converter


def reset_converter() -> None:
    """Forget the global converter so the next call builds a new one."""
    global _converter

    with _converter_lock:
        _converter = None


def m2h(markdown_text: str, options: Optional[ProcessorOptions] = None) -> str:
    """
    Convert documentation markdown to HTML.

    Args:
        markdown_text: Raw markdown content
        options: Processor options (locale, defaults to ``en-US``)

    Returns:
        HTML string
    """
    return get_converter().convert(markdown_text, options)


def main(argv=None):
    """Command-line entry point for the converter."""
    import argparse
    import sys

    def _build_parser() -> argparse.ArgumentParser:
        p = argparse.ArgumentParser(prog="m2h", description="Convert documentation Markdown to HTML.")
        p.add_argument("markdown", help="Markdown file to convert ('-' reads stdin)")
        p.add_argument("--output", "-o", type=Path, help="Destination HTML file (default: stdout)")
        p.add_argument("--locale", "-l", default=DEFAULT_LOCALE, help="Locale used for notecard labels")
        p.add_argument("--debug", action="store_true", help="Enable verbose logging")
        return p

    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(levelname)s  %(message)s",
    )

    if args.markdown == "-":
        markdown_text = sys.stdin.read()
    else:
        md_path = Path(args.markdown)
        if not md_path.exists():
            logger.error(f"Markdown file '{md_path}' not found")
            return 1
        markdown_text = md_path.read_text(encoding="utf-8")

    try:
        html = m2h(markdown_text, ProcessorOptions(locale=args.locale))
    except LocalizationError as e:
        logger.error(f"Localization error: {e}")
        return 2

    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(html, encoding="utf-8")
        logger.info("HTML written to %s", args.output)
    else:
        sys.stdout.write(html)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
