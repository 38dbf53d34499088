#!filepath: tests/l10n/test_translator.py
import pytest
from loguru import logger

from activity.l10n.translator import Translator
from activity.utils.errors import CatalogError


def test_missing_key_falls_back_to_source():
    l10n = Translator("xx", {})
    assert l10n.t("%s and %s", ["a", "b"]) == "a and b"


def test_positional_placeholders():
    l10n = Translator("en", {})
    assert l10n.t("%2$s shared %1$s with you", ["file.txt", "alice"]) == "alice shared file.txt with you"


def test_percent_escape_and_missing_argument():
    l10n = Translator("en", {})
    assert l10n.t("100%% of %s", ["x"]) == "100% of x"
    assert l10n.t("%s and %s", ["only"]) == "only and %s"


def test_plural_forms():
    l10n = Translator("de", {"%n file": ["%n Datei", "%n Dateien"]})

    assert l10n.n("%n file", "%n files", 1) == "1 Datei"
    assert l10n.n("%n file", "%n files", 4) == "4 Dateien"

    assert Translator("en").n("%n file", "%n files", 1) == "1 file"
    assert Translator("en").n("%n file", "%n files", 0) == "0 files"


def test_load_shipped_catalogs():
    assert Translator.load("en").t("%s and %s", ["a", "b"]) == "a and b"
    assert Translator.load("de").t("%s and %s", ["a", "b"]) == "a und b"


def test_unknown_language_is_english():
    l10n = Translator.load("zz")
    assert l10n.language == "zz"
    assert l10n.messages == {}


def test_load_from_custom_dir(tmp_path):
    (tmp_path / "fr.yml").write_text('"%s and %s": "%s et %s"\n', encoding="utf-8")

    assert Translator.load("fr", tmp_path).t("%s and %s", ["a", "b"]) == "a et b"


def test_malformed_catalog_raises(tmp_path):
    (tmp_path / "fr.yml").write_text("key: [unclosed\n", encoding="utf-8")

    with pytest.raises(CatalogError):
        Translator.load("fr", tmp_path)


def test_bad_plural_entry_raises(tmp_path):
    (tmp_path / "fr.yml").write_text('"%n file": ["a", "b", "c"]\n', encoding="utf-8")

    with pytest.raises(CatalogError, match="two string forms"):
        Translator.load("fr", tmp_path)


def test_load_is_logged(tmp_path):
    messages = []
    logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")

    Translator.load("de")

    assert any(m.startswith("[CALL] load") for m in messages)
    assert any(m.startswith("[RETURN] load result=Translator(language='de'") for m in messages)
    assert any(m.startswith("[TIME] load took") for m in messages)

    (tmp_path / "fr.yml").write_text("key: [unclosed\n", encoding="utf-8")
    with pytest.raises(CatalogError):
        Translator.load("fr", tmp_path)

    assert any(m.startswith("[ERROR] load: failed to load locale catalog") for m in messages)
