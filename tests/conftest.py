import json
import sys
from pathlib import Path

import pytest

# Ensure project root is on sys.path so `import m2h` works
project_root = Path(__file__).resolve().parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from m2h import localization  # noqa: E402


def write_locale(directory: Path, locale: str, note="Note:", warning="Warning:", callout="Callout:"):
    """Write a ``<locale>.json`` localization file with the three card labels."""
    translations = {
        f"card_{name}_label": {"msgid": f"card_{name}_label", "msgstr": [label]}
        for name, label in (("note", note), ("warning", warning), ("callout", callout))
    }
    path = directory / f"{locale}.json"
    path.write_text(json.dumps({"translations": {"": translations}}), encoding="utf-8")
    return path


@pytest.fixture
def make_locale():
    """Factory writing localization files, see :func:`write_locale`."""
    return write_locale


@pytest.fixture
def locale_dir(tmp_path):
    """A localization directory holding only the default locale."""
    write_locale(tmp_path, "en-US")
    return tmp_path


@pytest.fixture
def fresh_note_patterns():
    """Reset the process-wide pattern cache before and after the test."""
    localization.reset_note_patterns()
    yield
    localization.reset_note_patterns()
