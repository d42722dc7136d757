"""
Reversible encoding of ``{{...}}`` macro invocations.

Macro payloads are opaque to the Markdown engine: quotes, underscores or
brackets inside them must not be touched by inline parsing.  Before parsing,
each payload is replaced by its base64 form (``{{aHRtbGVsZW1lbnQoImNhbnZhcyIp}}``),
which contains no Markdown or HTML special characters; after rendering the
original payloads are restored byte for byte.
"""
import base64
import binascii
import logging
import re

logger = logging.getLogger(__name__)

MACRO_RE = re.compile(r"\{\{(.+?)\}\}")
# Link, image and autolink destinations come back with percent-encoded braces.
ENCODED_MACRO_RE = re.compile(
    r"(?:\{\{|%7[Bb]%7[Bb])([A-Za-z0-9+/]+={0,2})(?:\}\}|%7[Dd]%7[Dd])"
)


def encode_macros(text: str) -> str:
    """Replace every macro payload in *text* with its base64 encoding."""

    def _encode(match):
        payload = match.group(1).encode("utf-8")
        return "{{" + base64.b64encode(payload).decode("ascii") + "}}"

    return MACRO_RE.sub(_encode, text)


def decode_macros(html: str) -> str:
    """
    Restore macro payloads encoded by :func:`encode_macros`.

    Placeholders whose braces were percent-encoded by URL normalization are
    restored too.  Spans that are not valid base64 of UTF-8 text are left as
    they are.
    """

    def _decode(match):
        try:
            return "{{" + base64.b64decode(match.group(1), validate=True).decode("utf-8") + "}}"
        except (binascii.Error, UnicodeDecodeError):
            logger.debug("Leaving undecodable macro span %s", match.group(0))
            return match.group(0)

    return ENCODED_MACRO_RE.sub(_decode, html)
