"""
m2h

Converts documentation Markdown (with macros and notecard blockquotes) to HTML.
"""

from .converter import MarkdownConverter, get_converter, m2h
from .localization import LocalizationError, NotePatterns, get_note_patterns, load_note_patterns
from .macros import decode_macros, encode_macros
from .legacy import replace_old_dl
from .models import DEFAULT_LOCALE, ProcessorOptions

__all__ = [
    'm2h', 'MarkdownConverter', 'get_converter', 'ProcessorOptions', 'DEFAULT_LOCALE',
    'LocalizationError', 'NotePatterns', 'get_note_patterns', 'load_note_patterns',
    'encode_macros', 'decode_macros', 'replace_old_dl',
]
