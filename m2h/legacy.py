"""Rewrites of obsolete Markdown spellings, applied before parsing."""
import re

# "- Term" followed by "- : Definition", either line optionally quoted.
DL_RE = re.compile(r"^(> )?( *)- ([^\n]+)\n+(> )?( *)- : ", re.MULTILINE)


def replace_old_dl(markdown_text: str) -> str:
    """
    Convert the legacy definition-list spelling::

        - Term
        - : Definition

    into the ``Term`` / ``:   Definition`` form understood by the deflist
    plugin.  Blockquote markers are kept, indentation is dropped.
    """
    return DL_RE.sub(r"\1\3\n\4:   ", markdown_text)
