import re

from markdown_it import MarkdownIt
from markdown_it.rules_block import StateBlock

from ..models import TokenType

# Encoded macros look like `{{aHRtbGVsZW1lbnQoImNhbnZhcyIp}}` at this stage.
MACRO_LINE_RE = re.compile(r"^\{\{.*?\}\}$")


def macro_passthrough_plugin(md: MarkdownIt):
    """Markdown-it-py plugin that keeps block-level macro placeholders out of
    ``<p>`` wrappers.  A line consisting of a single ``{{...}}`` placeholder
    becomes a ``macro`` token whose content is rendered verbatim.
    """

    def _macro_block(state: StateBlock, start_line: int, end_line: int, silent: bool):
        # Only the first line of the candidate block is ever examined.
        if start_line >= end_line or state.isEmpty(start_line):
            return False

        # Indented code, not a macro
        if state.sCount[start_line] - state.blkIndent >= 4:
            return False

        line_start = state.bMarks[start_line] + state.tShift[start_line]
        line = state.src[line_start:state.eMarks[start_line]].strip()
        if not MACRO_LINE_RE.match(line):
            return False

        if silent:
            return True

        token = state.push(TokenType.MACRO, '', 0)
        token.block = True
        token.content = state.getLines(start_line, start_line + 1, state.blkIndent, True)
        token.map = [start_line, start_line + 1]

        state.line = start_line + 1
        return True

    # Insert before paragraph rule so placeholder lines are never wrapped
    md.block.ruler.before('paragraph', 'macro', _macro_block)
