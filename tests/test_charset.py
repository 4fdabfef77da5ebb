import io

import pytest

from vugu.htmlx.charset import (
    determine_encoding,
    from_meta_element,
    lookup,
    new_reader,
    new_reader_label,
)

CASES = [
    ("Résumé", "Résumé".encode("utf-8"), "utf8"),
    ("Résumé", b"R\xe9sum\xe9", "latin1"),
    ("これは漢字です。", b'S0\x8c0o0"oW[g0Y0\x020', "UTF-16LE"),
    ("これは漢字です。", b'0S0\x8c0oo"[W0g0Y0\x02', "UTF-16BE"),
    ("Hello, world", b"Hello, world", "ASCII"),
    ("Gda\u0144sk", b"Gda\xf1sk", "ISO-8859-2"),
    (
        "\u00c2\u00e2 \u010c\u010d \u0110\u0111 \u014a\u014b \u00d5\u00f5 "
        "\u0160\u0161 \u017d\u017e \u00c5\u00e5 \u00c4\u00e4",
        b"\xc2\xe2 \xc8\xe8 \xa9\xb9 \xaf\xbf \xd5\xf5 \xaa\xba \xac\xbc \xc5\xe5 \xc4\xe4",
        "ISO-8859-10",
    ),
    ("\u0e2a\u0e33\u0e2b\u0e23\u0e31\u0e1a", b"\xca\xd3\xcb\xc3\xd1\xba", "ISO-8859-11"),
    ("latvie\u0161u", b"latvie\xf0u", "ISO-8859-13"),
    ("Se\u00f2naid", b"Se\xf2naid", "ISO-8859-14"),
    ("\u20ac1 is cheap", b"\xa41 is cheap", "ISO-8859-15"),
    ("rom\u00e2ne\u0219te", b"rom\xe2ne\xbate", "ISO-8859-16"),
    ("nutra\u0135o", b"nutra\xbco", "ISO-8859-3"),
    ("Kal\u00e2dlit", b"Kal\xe2dlit", "ISO-8859-4"),
    ("русский", b"\xe0\xe3\xe1\xe1\xda\xd8\xd9", "ISO-8859-5"),
    ("ελληνικά", b"\xe5\xeb\xeb\xe7\xed\xe9\xea\xdc", "ISO-8859-7"),
    ("Ka\u011fan", b"Ka\xf0an", "ISO-8859-9"),
    ("Résumé", b"R\x8esum\x8e", "macintosh"),
    ("Gda\u0144sk", b"Gda\xf1sk", "windows-1250"),
    ("русский", b"\xf0\xf3\xf1\xf1\xea\xe8\xe9", "windows-1251"),
    ("Résumé", b"R\xe9sum\xe9", "windows-1252"),
    ("ελληνικά", b"\xe5\xeb\xeb\xe7\xed\xe9\xea\xdc", "windows-1253"),
    ("Ka\u011fan", b"Ka\xf0an", "windows-1254"),
    (
        "\u05e2\u05b4\u05d1\u05b0\u05e8\u05b4\u05d9\u05ea",
        b"\xf2\xc4\xe1\xc0\xf8\xc4\xe9\xfa",
        "windows-1255",
    ),
    ("العربية", b"\xc7\xe1\xda\xd1\xc8\xed\xc9", "windows-1256"),
    ("latvie\u0161u", b"latvie\xf0u", "windows-1257"),
    ("Vi\u00ea\u0323t", b"Vi\xea\xf2t", "windows-1258"),
    ("\u0e2a\u0e33\u0e2b\u0e23\u0e31\u0e1a", b"\xca\xd3\xcb\xc3\xd1\xba", "windows-874"),
    ("русский", b"\xd2\xd5\xd3\xd3\xcb\xc9\xca", "KOI8-R"),
    ("українська", b"\xd5\xcb\xd2\xc1\xa7\xce\xd3\xd8\xcb\xc1", "KOI8-U"),
    (
        "Hello 常用國字標準字體表",
        b"Hello \xb1`\xa5\xce\xb0\xea\xa6r\xbc\xd0\xb7\xc7\xa6r\xc5\xe9\xaa\xed",
        "big5",
    ),
    (
        "Hello 常用國字標準字體表",
        b"Hello \xb3\xa3\xd3\xc3\x87\xf8\xd7\xd6\x98\xcb\x9c\xca\xd7\xd6\xf3\x77\xb1\xed",
        "gbk",
    ),
    (
        "Hello 常用國字標準字體表",
        b"Hello \xb3\xa3\xd3\xc3\x87\xf8\xd7\xd6\x98\xcb\x9c\xca\xd7\xd6\xf3\x77\xb1\xed",
        "gb18030",
    ),
    (
        "\u05e2\u05b4\u05d1\u05b0\u05e8\u05b4\u05d9\u05ea",
        b"\x81\x30\xfb\x30\x81\x30\xf6\x34\x81\x30\xf9\x33\x81\x30\xf6\x30"
        b"\x81\x30\xfb\x36\x81\x30\xf6\x34\x81\x30\xfa\x31\x81\x30\xfb\x38",
        "gb18030",
    ),
    ("\u39ef", b"\x82\x31\x89\x38", "gb18030"),
    (
        "これは漢字です。",
        b"\x82\xb1\x82\xea\x82\xcd\x8a\xbf\x8e\x9a\x82\xc5\x82\xb7\x81B",
        "SJIS",
    ),
    ("Hello, 世界!", b"Hello, \x90\xa2\x8aE!", "SJIS"),
    ("ｲｳｴｵｶ", b"\xb2\xb3\xb4\xb5\xb6", "SJIS"),
    (
        "これは漢字です。",
        b"\xa4\xb3\xa4\xec\xa4\xcf\xb4\xc1\xbb\xfa\xa4\xc7\xa4\xb9\xa1\xa3",
        "EUC-JP",
    ),
    ("Hello, 世界!", b"Hello, \x1b$B@$3&\x1b(B!", "ISO-2022-JP"),
    (
        "다음과 같은 조건을 따라야 합니다: 저작자표시",
        b"\xb4\xd9\xc0\xbd\xb0\xfa \xb0\xb0\xc0\xba \xc1\xb6\xb0\xc7\xc0\xbb "
        b"\xb5\xfb\xb6\xf3\xbe\xdf \xc7\xd5\xb4\xcf\xb4\xd9: "
        b"\xc0\xfa\xc0\xdb\xc0\xda\xc7\xa5\xbd\xc3",
        "EUC-KR",
    ),
]

DECODE_CASES = CASES + [
    ("Rés\ufffdumé", "Rés".encode() + b"\xe1\x80" + "umé".encode(), "utf8"),
]

ENCODE_CASES = CASES + [
    ("Gda\u0144sk", b"Gda&#324;sk", "ISO-8859-11"),
    ("\ufffd", b"&#65533;", "ISO-8859-11"),
]


@pytest.mark.parametrize("text,data,label", DECODE_CASES)
def test_decode(text, data, label):
    enc, _ = lookup(label)
    assert enc is not None
    assert enc.decode(data) == text


@pytest.mark.parametrize("text,data,label", ENCODE_CASES)
def test_encode(text, data, label):
    enc, _ = lookup(label)
    assert enc is not None
    assert enc.encode(text) == data


@pytest.mark.parametrize(
    "label,name",
    [
        ("utf8", "utf-8"),
        ("  Latin1\n", "windows-1252"),
        ("SJIS", "shift_jis"),
        ("ISO-8859-11", "windows-874"),
        ("UTF-16", "utf-16le"),
    ],
)
def test_lookup_canonical_name(label, name):
    enc, got = lookup(label)
    assert got == name
    assert enc.name == name


def test_lookup_unknown():
    assert lookup("no-such-charset") == (None, "")


SNIFF_CASES = [
    (b"<html><body>plain</body></html>", "text/html; charset=iso-8859-15", "iso-8859-15"),
    (b"\xff\xfe" + "<p>hi</p>".encode("utf-16-le"), "", "utf-16le"),
    (b"\xfe\xff" + "<p>hi</p>".encode("utf-16-be"), "", "utf-16be"),
    (
        b'<meta http-equiv="Content-Type" content="text/html; charset=iso-8859-15"><p>x</p>',
        "text/html",
        "iso-8859-15",
    ),
    (b'<meta charset="iso-8859-15"><p>x</p>', "text/html", "iso-8859-15"),
    ("<p>caf\u00e9</p>".encode("utf-8"), "text/html", "utf-8"),
    (b"\xef\xbb\xbf<p>x</p>", "text/html; charset=iso-8859-15", "utf-8"),
    (
        b'<meta http-equiv="Content-Type" content="text/html; charset=iso-8859-2">',
        "text/html; charset=iso-8859-15",
        "iso-8859-15",
    ),
    (b'<meta charset="iso-8859-2">', "text/html; charset=iso-8859-15", "iso-8859-15"),
    (
        b'\xef\xbb\xbf<meta http-equiv="Content-Type" content="text/html; charset=iso-8859-15">',
        "text/html",
        "utf-8",
    ),
    (b'\xef\xbb\xbf<meta charset="iso-8859-15">', "text/html", "utf-8"),
]


@pytest.mark.parametrize("content,declared,want", SNIFF_CASES)
def test_sniff(content, declared, want):
    _, name, _ = determine_encoding(content, declared)
    assert name == want


@pytest.mark.parametrize("content,declared,want", SNIFF_CASES)
def test_reader(content, declared, want):
    got = new_reader(io.BytesIO(content), declared).read()
    enc, _ = lookup(want)
    assert got == enc.decode(content).encode("utf-8")


def test_certainty():
    assert determine_encoding(b"\xff\xfeabc", "")[2] is True
    assert determine_encoding(b"abc", "text/html; charset=koi8-r")[2] is True
    assert determine_encoding(b'<meta charset="koi8-r">', "")[2] is False


def test_meta_content_without_pragma_is_ignored():
    content = b'<meta content="text/html; charset=iso-8859-15">'
    assert determine_encoding(content, "")[1] == "windows-1252"


def test_meta_utf16_becomes_utf8():
    assert determine_encoding(b'<meta charset="utf-16le">', "")[1] == "utf-8"


def test_partial_rune_at_end_still_utf8():
    content = "caf\u00e9 ".encode("utf-8") + b"\xe2\x82"
    assert determine_encoding(content, "")[1] == "utf-8"


def test_invalid_utf8_falls_back_to_windows_1252():
    assert determine_encoding(b"caf\xe9 au lait", "")[1] == "windows-1252"


def test_ascii_falls_back_to_windows_1252():
    assert determine_encoding(b"<p>plain</p>", "")[1] == "windows-1252"


def test_reader_long_input_spans_preview():
    content = b"<p>" + b"\xe9" * 3000 + b"</p>"
    got = new_reader(io.BytesIO(content), "text/html; charset=latin1").read()
    assert got == ("<p>" + "\u00e9" * 3000 + "</p>").encode("utf-8")


def test_reader_empty_stream():
    with pytest.raises(EOFError):
        new_reader(io.BytesIO(b""), "")


@pytest.mark.parametrize(
    "meta,want",
    [
        ("", ""),
        ("text/html", ""),
        ("text/html; charset utf-8", ""),
        ("text/html; charset=latin-2", "latin-2"),
        ("text/html; charset; charset = utf-8", "utf-8"),
        ('charset="big5"', "big5"),
        ("charset='shift_jis'", "shift_jis"),
    ],
)
def test_from_meta(meta, want):
    assert from_meta_element(meta) == want


def test_reader_label():
    reader = new_reader_label("windows-1252", io.BytesIO(b"r\xe9sum\xe9"))
    assert reader.read().decode("utf-8") == "résumé"


def test_reader_label_unknown():
    with pytest.raises(ValueError, match="unsupported charset"):
        new_reader_label("bogus", io.BytesIO(b""))