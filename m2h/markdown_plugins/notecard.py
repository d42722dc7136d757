"""
Notecard transform: blockquotes opening with a bold label become admonitions.

    > **Note:** Some text.

renders as ``<div class="notecard note">`` instead of ``<blockquote>``.  The
labels are localized; the active locale is read from ``env["locale"]`` on
every render.  Only token types and attributes are rewritten, so the
open/close pairing of the token stream never changes.
"""
import logging
from typing import List, Optional

from markdown_it import MarkdownIt
from markdown_it.rules_core import StateCore
from markdown_it.token import Token

from ..localization import NotePatterns, get_note_patterns
from ..models import DEFAULT_LOCALE, NotecardType, TokenType

logger = logging.getLogger(__name__)


def find_token_index(tokens: List[Token], token_type: str, position: int,
                     level: Optional[int] = None) -> int:
    """
    Index of the next token of *token_type* at or after *position*, or -1.

    If *level* is given the token must also sit at that nesting level.
    """
    for i in range(position, len(tokens)):
        token = tokens[i]
        if token.type == token_type and (level is None or token.level == level):
            return i
    return -1


def apply_notecards(tokens: List[Token], patterns: NotePatterns, locale: str) -> int:
    """
    Rewrite matching top-most blockquotes in *tokens* in place.

    Returns:
        Number of notecards created.
    """
    count = 0
    i = 0
    while i < len(tokens):
        start = find_token_index(tokens, TokenType.BLOCKQUOTE_OPEN, i)
        if start == -1:
            break

        level = tokens[start].level
        end = find_token_index(tokens, TokenType.BLOCKQUOTE_CLOSE, start + 1, level)
        if end == -1:
            logger.debug("Unclosed blockquote at token %d, skipping", start)
            break

        # Nested blockquotes are never notecards on their own.
        i = end + 1

        if start + 2 >= end:
            continue
        paragraph_open = tokens[start + 1]
        inline = tokens[start + 2]
        if paragraph_open.type != TokenType.PARAGRAPH_OPEN or inline.type != TokenType.INLINE:
            continue

        notecard_type = patterns.match(locale, inline.content)
        if notecard_type is None:
            continue

        tokens[start].type = TokenType.NOTECARD_OPEN
        tokens[start].attrSet("notecardType", notecard_type)
        tokens[end].type = TokenType.NOTECARD_CLOSE
        count += 1

        if notecard_type == NotecardType.CALLOUT:
            # Drop the label paragraph; later paragraphs render as usual.
            p_start = start + 1
            p_end = find_token_index(
                tokens, TokenType.PARAGRAPH_CLOSE, p_start + 1, tokens[p_start].level
            )
            if p_end == -1:
                continue
            tokens[p_start].type = TokenType.NOOP
            inline.type = TokenType.NOOP
            tokens[p_end].type = TokenType.NOOP

    return count


def notecard_plugin(md: MarkdownIt, patterns: Optional[NotePatterns] = None):
    """Markdown-it-py plugin registering the notecard core rule.

    Args:
        md: Parser instance to extend
        patterns: Label patterns to use; the process-wide patterns are loaded
            on first render when omitted
    """

    def _notecard(state: StateCore) -> None:
        note_patterns = patterns if patterns is not None else get_note_patterns()
        locale = state.env.get("locale") or DEFAULT_LOCALE
        count = apply_notecards(state.tokens, note_patterns, locale)
        if count:
            logger.debug("Converted %d blockquote(s) to notecards (locale %s)", count, locale)

    # After block parsing, before inline parsing
    md.core.ruler.after('block', 'notecard', _notecard)
