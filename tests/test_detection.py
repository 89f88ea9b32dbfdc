# tests/test_detection.py
"""End-to-end detection of short legacy-encoded samples."""

from __future__ import annotations

import pytest

from webchardet import detect


@pytest.mark.parametrize(
    ("text", "codec", "expected"),
    [
        ("こんにちは", "shift_jis", "shift_jis"),
        ("これはテストです。日本語のテキスト。", "shift_jis", "shift_jis"),
        ("こんにちは", "euc_jp", "euc-jp"),
        ("서로 의지한다", "euc_kr", "euc-kr"),
        ("我们是中国人", "gbk", "gbk"),
        ("这是中文测试文本，用于并发检测。", "gb18030", "gbk"),  # noqa: RUF001
        ("一人大", "big5", "big5"),
        ("Русский", "cp1251", "windows-1251"),
        ("Русский", "cp866", "ibm866"),
        ("Русский", "koi8_u", "koi8-u"),
        ("Ελληνικά", "cp1253", "windows-1253"),
        # Ά is 0xB6 here and the pilcrow in windows-1253
        (
            "Άρθρο 1. Όλοι οι άνθρωποι γεννιούνται ελεύθεροι και ίσοι "
            "στην αξιοπρέπεια και τα δικαιώματα.",
            "iso8859_7",
            "iso-8859-7",
        ),
        (
            "Visi žmonės gimsta laisvi ir lygūs savo orumu ir teisėmis.",
            "cp1257",
            "windows-1257",
        ),
        (
            "Allir menn eru bornir frjálsir og jafnir að virðingu og réttindum.",
            "cp1252",
            "windows-1252",
        ),
        ("עברית", "cp1255", "windows-1255"),
        ("Straße", "cp1252", "windows-1252"),
        ("Ääni", "cp1252", "windows-1252"),
        (
            "Die Größe des Gebäudes überraschte die Besucher. "
            "Natürlich können wir das ändern.",
            "cp1252",
            "windows-1252",
        ),
    ],
)
def test_detect_sample(text, codec, expected):
    assert detect(text.encode(codec))["encoding"] == expected


def test_visual_hebrew():
    # "עולם שלום." stored in display order
    data = b".\xed\xec\xe5\xf2 \xed\xe5\xec\xf9"
    assert detect(data)["encoding"] == "iso-8859-8"


def test_ascii_defaults_to_windows_1252():
    assert detect(b"<html><body>Hello</body></html>")["encoding"] == "windows-1252"


@pytest.mark.parametrize(
    ("tld", "expected"),
    [
        ("jp", "shift_jis"),
        ("cn", "gbk"),
        ("kr", "euc-kr"),
        ("tw", "big5"),
        ("cz", "windows-1250"),
        ("tr", "windows-1254"),
        ("vn", "windows-1258"),
        ("lt", "windows-1257"),
        ("com", "windows-1252"),
    ],
)
def test_ascii_with_tld(tld, expected):
    assert detect(b"Hello world", tld=tld)["encoding"] == expected


@pytest.mark.parametrize("tld", ["ru", "gr", "il", "th", "sa"])
def test_ascii_with_non_latin_tld_falls_back(tld):
    # non-Latin tables need a word in their own script to survive
    assert detect(b"Hello world", tld=tld)["encoding"] == "windows-1252"


def test_utf8_input_reports_legacy_guess():
    data = "Größe".encode()
    result = detect(data)
    assert result["valid_non_ascii_utf8"] is True
    assert result["encoding"] != "utf-8"
    assert detect(data, allow_utf8=True)["encoding"] == "utf-8"
