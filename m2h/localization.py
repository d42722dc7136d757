"""Localized notecard label patterns.

Every ``<locale>.json`` file in the localization directory provides the three
notecard labels for that locale::

    {"translations": {"": {"card_note_label": {"msgstr": ["Note:"]}, ...}}}

The labels are turned into one case-insensitive regular expression per
locale that recognizes a paragraph opening with ``**<label>...**``.  The
patterns are built once, on first use, and shared by the whole process.
"""
import json
import logging
import re
import threading
from pathlib import Path
from typing import Dict, Optional, Pattern, Tuple, Union

from .models import DEFAULT_LOCALE, NotecardType

logger = logging.getLogger(__name__)

LOCALIZATION_DIR = Path(__file__).parent / "localizations"

# Colons (ASCII and full-width) and spaces are not part of the label itself.
_LABEL_STRIP_RE = re.compile(r"[: ：]")


class LocalizationError(ValueError):
    """Raised when localization data is missing or malformed."""


def _read_labels(path: Path) -> Dict[str, str]:
    """Return ``{notecard_type: normalized_label}`` for one locale file."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise LocalizationError(f"Cannot read localization file {path}: {e}") from e

    try:
        translations = data["translations"][""]
    except (KeyError, TypeError) as e:
        raise LocalizationError(f"{path.name}: missing translations block") from e

    labels = {}
    for notecard_type in NotecardType.ALL:
        msg_name = f"card_{notecard_type}_label"
        try:
            raw = translations[msg_name]["msgstr"][0]
        except (KeyError, IndexError, TypeError) as e:
            raise LocalizationError(f"{path.name}: missing label '{msg_name}'") from e
        if not isinstance(raw, str):
            raise LocalizationError(f"{path.name}: label '{msg_name}' is not a string")

        label = _LABEL_STRIP_RE.sub("", raw).lower()
        if not label:
            raise LocalizationError(f"{path.name}: label '{msg_name}' is empty")
        labels[notecard_type] = label
    return labels


def compile_note_pattern(labels: Dict[str, str]) -> Pattern:
    """
    Build the label matcher for one locale.

    Each alternative is a named group called after its canonical notecard
    type, so ``match.lastgroup`` tells which kind matched regardless of the
    locale's wording.
    """
    alternatives = "|".join(
        f"(?P<{notecard_type}>{re.escape(labels[notecard_type])})"
        for notecard_type in NotecardType.ALL
    )
    return re.compile(rf"^\*\*(?:{alternatives}).*\*\* *", re.IGNORECASE)


class NotePatterns:
    """
    Locale -> compiled pattern mapping with explicit default-locale fallback.
    """

    def __init__(self, patterns: Dict[str, Pattern], default_locale: str = DEFAULT_LOCALE):
        if default_locale not in patterns:
            raise LocalizationError(
                f"No localization for default locale '{default_locale}'. "
                f"Available locales: {sorted(patterns)}"
            )
        self.patterns = patterns
        self.default_locale = default_locale

    def __contains__(self, locale: str) -> bool:
        return locale in self.patterns

    def __len__(self) -> int:
        return len(self.patterns)

    def get(self, locale: str) -> Optional[Pattern]:
        """Exact lookup, no fallback."""
        return self.patterns.get(locale)

    def resolve(self, locale: Optional[str]) -> Tuple[str, Pattern]:
        """
        Return ``(locale_used, pattern)`` for *locale*.

        Looks up the exact locale first, then the default locale.
        """
        pattern = self.patterns.get(locale) if locale else None
        if pattern is not None:
            return locale, pattern

        logger.debug("No note pattern for locale %r, using %s", locale, self.default_locale)
        return self.default_locale, self.patterns[self.default_locale]

    def match(self, locale: Optional[str], text: str) -> Optional[str]:
        """
        Match *text* against the pattern for *locale*.

        Returns:
            The canonical notecard type (``note``, ``warning`` or ``callout``),
            or ``None`` if *text* does not open with a notecard label.
        """
        _, pattern = self.resolve(locale)
        match = pattern.match(text)
        if match is None:
            return None
        return match.lastgroup


def load_note_patterns(
    localization_dir: Union[str, Path, None] = None,
    default_locale: str = DEFAULT_LOCALE,
) -> NotePatterns:
    """
    Read every ``*.json`` locale file in *localization_dir*.

    Raises:
        LocalizationError: If the directory or any locale file is unusable.
    """
    directory = Path(localization_dir) if localization_dir else LOCALIZATION_DIR
    if not directory.is_dir():
        raise LocalizationError(f"Localization directory not found: {directory}")

    patterns = {}
    for path in sorted(directory.glob("*.json")):
        patterns[path.stem] = compile_note_pattern(_read_labels(path))

    logger.debug("Loaded note patterns for %d locales from %s", len(patterns), directory)
    return NotePatterns(patterns, default_locale=default_locale)


# Process-wide pattern cache
_note_patterns = None
_note_patterns_lock = threading.Lock()


def get_note_patterns() -> NotePatterns:
    """
    Get the process-wide :class:`NotePatterns`, loading it on first use.
    """
    global _note_patterns

    if _note_patterns is None:
        with _note_patterns_lock:
            if _note_patterns is None:
                _note_patterns = load_note_patterns()

    return _note_patterns


def reset_note_patterns() -> None:
    """Drop the cached patterns so the next call reloads them."""
    global _note_patterns

    with _note_patterns_lock:
        _note_patterns = None
