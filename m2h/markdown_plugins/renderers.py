import re

from markdown_it import MarkdownIt
from markdown_it.common.utils import escapeHtml, unescapeAll

from ..models import NotecardType, TokenType

NOLINT_SUFFIX_RE = re.compile(r"-nolint$")


def fence_css_classes(info: str) -> str:
    """
    CSS classes for a fenced code block with the given info string.

    ``"js example"`` -> ``"brush: js example"``, ``"python-nolint"`` ->
    ``"brush: python"``.
    """
    meta = unescapeAll(info).strip().split() if info else []
    language = NOLINT_SUFFIX_RE.sub("", meta[0]) if meta else ""
    rest = " ".join(meta[1:])
    if language:
        return f"brush: {language} {rest}".strip()
    return rest.strip()


def render_fence(self, tokens, idx, options, env):
    token = tokens[idx]
    return f'<pre class="{escapeHtml(fence_css_classes(token.info))}">{escapeHtml(token.content)}</pre>\n'


def render_macro(self, tokens, idx, options, env):
    return f"\n{tokens[idx].content}\n"


def render_notecard_open(self, tokens, idx, options, env):
    notecard_type = tokens[idx].attrGet("notecardType")
    if notecard_type == NotecardType.CALLOUT:
        class_names = ["callout"]
    else:
        class_names = ["notecard", notecard_type]
    return f'<div class="{" ".join(class_names)}">\n'


def render_notecard_close(self, tokens, idx, options, env):
    return "</div>\n"


def render_noop(self, tokens, idx, options, env):
    return ""


def renderers_plugin(md: MarkdownIt):
    """Markdown-it-py plugin installing the HTML renderers for fences and for
    the token types produced by the macro and notecard plugins.  All other
    tokens keep the default rendering.
    """
    md.add_render_rule('fence', render_fence)
    md.add_render_rule(TokenType.MACRO, render_macro)
    md.add_render_rule(TokenType.NOTECARD_OPEN, render_notecard_open)
    md.add_render_rule(TokenType.NOTECARD_CLOSE, render_notecard_close)
    md.add_render_rule(TokenType.NOOP, render_noop)
