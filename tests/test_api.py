# tests/test_api.py
from __future__ import annotations

import logging

import pytest

import webchardet
from webchardet import DetectionResult, EncodingDetector, Tld, classify_tld, detect


def test_public_names():
    assert set(webchardet.__all__) == {
        "DetectionResult",
        "EncodingDetector",
        "Tld",
        "classify_tld",
        "detect",
    }
    assert webchardet.DetectionResult is DetectionResult
    assert webchardet.EncodingDetector is EncodingDetector
    assert webchardet.Tld is Tld
    assert webchardet.classify_tld is classify_tld


def test_version():
    assert isinstance(webchardet.__version__, str)


def test_detect_returns_dict():
    result = detect(b"Hello world")
    assert isinstance(result, dict)
    assert set(result) == {"encoding", "valid_non_ascii_utf8"}


def test_detect_ascii():
    result = detect(b"Hello world")
    assert result["encoding"] == "windows-1252"
    assert result["valid_non_ascii_utf8"] is False


def test_detect_empty():
    result = detect(b"")
    assert result == {"encoding": "windows-1252", "valid_non_ascii_utf8": False}


def test_detect_bytearray():
    result = detect(bytearray("Straße".encode("cp1252")))
    assert result["encoding"] == "windows-1252"


def test_detect_memoryview():
    data = "こんにちは".encode("shift_jis")
    assert detect(memoryview(data))["encoding"] == "shift_jis"


def test_detect_rejects_str():
    with pytest.raises(TypeError, match="Expected object of type bytes or bytearray"):
        detect("not bytes")  # type: ignore[arg-type]


def test_detect_rejects_int():
    with pytest.raises(TypeError):
        detect(42)  # type: ignore[arg-type]


@pytest.mark.parametrize("max_bytes", [0, -1])
def test_detect_rejects_non_positive_max_bytes(max_bytes):
    with pytest.raises(ValueError, match="max_bytes must be a positive integer"):
        detect(b"Hello", max_bytes=max_bytes)


def test_detect_rejects_bool_max_bytes():
    with pytest.raises(ValueError, match="max_bytes must be a positive integer"):
        detect(b"Hello", max_bytes=True)


def test_detect_max_bytes_truncates():
    # The Cyrillic tail is never examined, so only ASCII is seen.
    data = b"Hello world " + "Русский".encode("cp1251")
    assert detect(data)["encoding"] == "windows-1251"
    assert detect(data, max_bytes=12)["encoding"] == "windows-1252"


def test_detect_utf8_is_flagged_not_reported():
    data = "Größe und Gewicht".encode()
    result = detect(data)
    assert result["valid_non_ascii_utf8"] is True
    assert result["encoding"] != "utf-8"


def test_detect_allow_utf8():
    data = "Größe und Gewicht".encode()
    assert detect(data, allow_utf8=True)["encoding"] == "utf-8"


def test_detect_allow_utf8_ignored_for_ascii():
    result = detect(b"plain ascii", allow_utf8=True)
    assert result["encoding"] == "windows-1252"


def test_detect_allow_utf8_ignored_for_invalid_utf8():
    data = "Straße".encode("cp1252")
    result = detect(data, allow_utf8=True)
    assert result["encoding"] == "windows-1252"
    assert result["valid_non_ascii_utf8"] is False


def test_detect_tld_breaks_ascii_tie():
    assert detect(b"Hello world", tld="jp")["encoding"] == "shift_jis"
    assert detect(b"Hello world", tld=Tld.KOREAN)["encoding"] == "euc-kr"
    assert detect(b"Hello world", tld=b"tw")["encoding"] == "big5"
    assert detect(b"Hello world", tld="www.example.pl")["encoding"] == "windows-1250"


def test_detect_tld_without_live_candidate_falls_back():
    assert detect(b"1, 2. 3!", tld="ru")["encoding"] == "windows-1252"


def test_detect_unknown_tld_is_ignored():
    assert detect(b"Hello world", tld="example")["encoding"] == "windows-1252"


def test_detect_matches_streaming_detector():
    data = "Ελληνικά".encode("cp1253")
    detector = EncodingDetector()
    detector.feed(data)
    assert detect(data) == detector.finish().to_dict()


def test_disqualification_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="webchardet"):
        detect(b"\x81")
    assert "windows-1252 disqualified within 1 bytes" in caplog.text


def test_ignored_tld_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="webchardet"):
        detect(b"Hello", tld="nonsense")
    assert "no language family for TLD 'nonsense'" in caplog.text


def test_no_output_without_debug_logging(caplog):
    with caplog.at_level(logging.WARNING, logger="webchardet"):
        detect("Русский".encode("cp1251"))
    assert caplog.records == []
