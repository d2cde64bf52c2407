import pytest

from po_identity.core.model import PluralTranslation, Translation


@pytest.fixture()
def sample_catalog() -> list[Translation | PluralTranslation]:
    return [
        Translation(msgid="Hello", msgstr="Hallo", po_source_line=3),
        Translation(msgctxt="menu", msgid="Open", msgstr="Öffnen", po_source_line=6),
        PluralTranslation(
            msgid="One file",
            msgid_plural="%{count} files",
            msgstr={0: "Eine Datei", 1: "%{count} Dateien"},
            po_source_line=10,
        ),
        Translation(msgid="Open", msgstr="Öffnen", po_source_line=15),
    ]
