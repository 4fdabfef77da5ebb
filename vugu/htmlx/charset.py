"""Common text encodings for HTML documents, keyed by their standard labels.

Labels follow the WHATWG Encoding Standard: matching is case-insensitive and
ignores surrounding whitespace.  Encoders replace characters the target
encoding cannot represent with HTML numeric character references.
"""

from __future__ import annotations

import codecs
import email.message
import email.utils
import io
from dataclasses import dataclass
from html.parser import HTMLParser
from typing import BinaryIO

__all__ = [
    "HTMLEncoding",
    "determine_encoding",
    "from_meta_element",
    "lookup",
    "new_reader",
    "new_reader_label",
]

_PREVIEW_SIZE = 1024
_CHUNK_SIZE = 8192
_HTML_SPACE = " \t\n\f\r"


@dataclass(frozen=True)
class HTMLEncoding:
    """A text encoding with its canonical name and the codecs implementing it."""

    name: str
    codec: str
    encode_codec: str

    def decode(self, data: bytes) -> str:
        """Decode ``data``, replacing malformed sequences with U+FFFD."""
        return codecs.decode(bytes(data), self.codec, "replace")

    def encode(self, text: str) -> bytes:
        """Encode ``text``, writing unsupported characters as ``&#NNN;``."""
        return codecs.encode(text, self.encode_codec, "xmlcharrefreplace")

    def _incremental_decoder(self) -> codecs.IncrementalDecoder:
        return codecs.getincrementaldecoder(self.codec)(errors="replace")


# canonical name -> (decoding codec, encoding codec, labels)
_ENCODINGS: dict[str, tuple[str, str, tuple[str, ...]]] = {
    "utf-8": ("utf_8", "utf_8", (
        "unicode-1-1-utf-8", "unicode11utf8", "unicode20utf8", "utf-8", "utf8",
        "x-unicode20utf8",
    )),
    "ibm866": ("cp866", "cp866", ("866", "cp866", "csibm866", "ibm866")),
    "iso-8859-2": ("iso8859_2", "iso8859_2", (
        "csisolatin2", "iso-8859-2", "iso-ir-101", "iso8859-2", "iso88592",
        "iso_8859-2", "iso_8859-2:1987", "l2", "latin2",
    )),
    "iso-8859-3": ("iso8859_3", "iso8859_3", (
        "csisolatin3", "iso-8859-3", "iso-ir-109", "iso8859-3", "iso88593",
        "iso_8859-3", "iso_8859-3:1988", "l3", "latin3",
    )),
    "iso-8859-4": ("iso8859_4", "iso8859_4", (
        "csisolatin4", "iso-8859-4", "iso-ir-110", "iso8859-4", "iso88594",
        "iso_8859-4", "iso_8859-4:1988", "l4", "latin4",
    )),
    "iso-8859-5": ("iso8859_5", "iso8859_5", (
        "csisolatincyrillic", "cyrillic", "iso-8859-5", "iso-ir-144",
        "iso8859-5", "iso88595", "iso_8859-5", "iso_8859-5:1988",
    )),
    "iso-8859-6": ("iso8859_6", "iso8859_6", (
        "arabic", "asmo-708", "csiso88596e", "csiso88596i", "csisolatinarabic",
        "ecma-114", "iso-8859-6", "iso-8859-6-e", "iso-8859-6-i", "iso-ir-127",
        "iso8859-6", "iso88596", "iso_8859-6", "iso_8859-6:1987",
    )),
    "iso-8859-7": ("iso8859_7", "iso8859_7", (
        "csisolatingreek", "ecma-118", "elot_928", "greek", "greek8",
        "iso-8859-7", "iso-ir-126", "iso8859-7", "iso88597", "iso_8859-7",
        "iso_8859-7:1987", "sun_eu_greek",
    )),
    "iso-8859-8": ("iso8859_8", "iso8859_8", (
        "csiso88598e", "csisolatinhebrew", "hebrew", "iso-8859-8",
        "iso-8859-8-e", "iso-ir-138", "iso8859-8", "iso88598", "iso_8859-8",
        "iso_8859-8:1988", "visual",
    )),
    "iso-8859-8-i": ("iso8859_8", "iso8859_8", (
        "csiso88598i", "iso-8859-8-i", "logical",
    )),
    "iso-8859-10": ("iso8859_10", "iso8859_10", (
        "csisolatin6", "iso-8859-10", "iso-ir-157", "iso8859-10", "iso885910",
        "l6", "latin6",
    )),
    "iso-8859-13": ("iso8859_13", "iso8859_13", (
        "iso-8859-13", "iso8859-13", "iso885913",
    )),
    "iso-8859-14": ("iso8859_14", "iso8859_14", (
        "iso-8859-14", "iso8859-14", "iso885914",
    )),
    "iso-8859-15": ("iso8859_15", "iso8859_15", (
        "csisolatin9", "iso-8859-15", "iso8859-15", "iso885915", "iso_8859-15",
        "l9",
    )),
    "iso-8859-16": ("iso8859_16", "iso8859_16", ("iso-8859-16",)),
    "koi8-r": ("koi8_r", "koi8_r", ("cskoi8r", "koi", "koi8", "koi8-r", "koi8_r")),
    "koi8-u": ("koi8_u", "koi8_u", ("koi8-ru", "koi8-u")),
    "macintosh": ("mac_roman", "mac_roman", (
        "csmacintosh", "mac", "macintosh", "x-mac-roman",
    )),
    "windows-874": ("cp874", "cp874", (
        "dos-874", "iso-8859-11", "iso8859-11", "iso885911", "tis-620",
        "windows-874",
    )),
    "windows-1250": ("cp1250", "cp1250", ("cp1250", "windows-1250", "x-cp1250")),
    "windows-1251": ("cp1251", "cp1251", ("cp1251", "windows-1251", "x-cp1251")),
    "windows-1252": ("cp1252", "cp1252", (
        "ansi_x3.4-1968", "ascii", "cp1252", "cp819", "csisolatin1", "ibm819",
        "iso-8859-1", "iso-ir-100", "iso8859-1", "iso88591", "iso_8859-1",
        "iso_8859-1:1987", "l1", "latin1", "us-ascii", "windows-1252",
        "x-cp1252",
    )),
    "windows-1253": ("cp1253", "cp1253", ("cp1253", "windows-1253", "x-cp1253")),
    "windows-1254": ("cp1254", "cp1254", (
        "cp1254", "csisolatin5", "iso-8859-9", "iso-ir-148", "iso8859-9",
        "iso88599", "iso_8859-9", "iso_8859-9:1989", "l5", "latin5",
        "windows-1254", "x-cp1254",
    )),
    "windows-1255": ("cp1255", "cp1255", ("cp1255", "windows-1255", "x-cp1255")),
    "windows-1256": ("cp1256", "cp1256", ("cp1256", "windows-1256", "x-cp1256")),
    "windows-1257": ("cp1257", "cp1257", ("cp1257", "windows-1257", "x-cp1257")),
    "windows-1258": ("cp1258", "cp1258", ("cp1258", "windows-1258", "x-cp1258")),
    "x-mac-cyrillic": ("mac_cyrillic", "mac_cyrillic", (
        "x-mac-cyrillic", "x-mac-ukrainian",
    )),
    "gbk": ("gb18030", "gbk", (
        "chinese", "csgb2312", "csiso58gb231280", "gb2312", "gb_2312",
        "gb_2312-80", "gbk", "iso-ir-58", "x-gbk",
    )),
    "gb18030": ("gb18030", "gb18030", ("gb18030",)),
    "big5": ("big5hkscs", "big5", (
        "big5", "big5-hkscs", "cn-big5", "csbig5", "x-x-big5",
    )),
    "euc-jp": ("euc_jp", "euc_jp", ("cseucpkdfmtjapanese", "euc-jp", "x-euc-jp")),
    "iso-2022-jp": ("iso2022_jp", "iso2022_jp", ("csiso2022jp", "iso-2022-jp")),
    "shift_jis": ("cp932", "cp932", (
        "csshiftjis", "ms932", "ms_kanji", "shift-jis", "shift_jis", "sjis",
        "windows-31j", "x-sjis",
    )),
    "euc-kr": ("cp949", "cp949", (
        "cseuckr", "csksc56011987", "euc-kr", "iso-ir-149", "korean",
        "ks_c_5601-1987", "ks_c_5601-1989", "ksc5601", "ksc_5601", "windows-949",
    )),
    "utf-16be": ("utf_16_be", "utf_16_be", ("unicodefffe", "utf-16be")),
    "utf-16le": ("utf_16_le", "utf_16_le", (
        "csunicode", "iso-10646-ucs-2", "ucs-2", "unicode", "unicodefeff",
        "utf-16", "utf-16le",
    )),
}

_BY_NAME: dict[str, HTMLEncoding] = {
    name: HTMLEncoding(name, dec, enc) for name, (dec, enc, _) in _ENCODINGS.items()
}
_BY_LABEL: dict[str, HTMLEncoding] = {
    label: _BY_NAME[name]
    for name, (_, _, labels) in _ENCODINGS.items()
    for label in labels
}

# UTF-8 detected from content alone: bytes are passed through untouched.
_NOP = HTMLEncoding("utf-8", "utf_8", "utf_8")

_BOMS = (
    (b"\xfe\xff", "utf-16be"),
    (b"\xff\xfe", "utf-16le"),
    (b"\xef\xbb\xbf", "utf-8"),
)


def lookup(label: str) -> tuple[HTMLEncoding | None, str]:
    """Return the encoding for ``label`` and its canonical name.

    Returns ``(None, "")`` when the label is not a standard HTML encoding.
    """
    enc = _BY_LABEL.get(label.strip(_HTML_SPACE).lower())
    if enc is None:
        return None, ""
    return enc, enc.name


def _charset_param(content_type: str) -> str | None:
    if not content_type or not content_type.strip():
        return None
    msg = email.message.Message()
    msg["content-type"] = content_type
    value = msg.get_param("charset")
    if value is None:
        return None
    return email.utils.collapse_rfc2231_value(value)


def determine_encoding(
    content: bytes, content_type: str = ""
) -> tuple[HTMLEncoding, str, bool]:
    """Work out the encoding of an HTML document.

    Examines up to the first 1024 bytes of ``content`` and the declared
    ``content_type``.  Returns ``(encoding, name, certain)``.
    """
    content = bytes(content[:_PREVIEW_SIZE])

    for bom, label in _BOMS:
        if content.startswith(bom):
            enc, name = lookup(label)
            return enc, name, True

    charset = _charset_param(content_type)
    if charset is not None:
        enc, name = lookup(charset)
        if enc is not None:
            return enc, name, True

    if content:
        enc, name = _prescan(content)
        if enc is not None:
            return enc, name, False

    # drop a partial multi-byte sequence at the end before validating
    for i in range(len(content) - 1, max(len(content) - 4, -1), -1):
        b = content[i]
        if b < 0x80:
            break
        if b & 0xC0 != 0x80:
            content = content[:i]
            break
    if any(c >= 0x80 for c in content):
        try:
            content.decode("utf-8")
        except UnicodeDecodeError:
            pass
        else:
            return _NOP, "utf-8", False

    return _BY_NAME["windows-1252"], "windows-1252", False


class _PrefixedReader(io.RawIOBase):
    """Reads ``prefix`` first, then the rest of ``stream``."""

    def __init__(self, prefix: bytes, stream: BinaryIO | None) -> None:
        self._prefix = prefix
        self._stream = stream

    def readable(self) -> bool:
        return True

    def readinto(self, buf) -> int:
        if self._prefix:
            n = min(len(buf), len(self._prefix))
            buf[:n] = self._prefix[:n]
            self._prefix = self._prefix[n:]
            return n
        if self._stream is None:
            return 0
        data = self._stream.read(len(buf)) or b""
        buf[: len(data)] = data
        return len(data)


class _DecodingReader(io.RawIOBase):
    """Decodes ``source`` with ``encoding`` and yields the text as UTF-8."""

    def __init__(self, source, encoding: HTMLEncoding) -> None:
        self._source = source
        self._decoder = encoding._incremental_decoder()
        self._pending = b""
        self._eof = False

    def readable(self) -> bool:
        return True

    def readinto(self, buf) -> int:
        while not self._pending and not self._eof:
            chunk = self._source.read(_CHUNK_SIZE) or b""
            if chunk:
                text = self._decoder.decode(chunk)
            else:
                self._eof = True
                text = self._decoder.decode(b"", final=True)
            self._pending = text.encode("utf-8")
        n = min(len(buf), len(self._pending))
        buf[:n] = self._pending[:n]
        self._pending = self._pending[n:]
        return n


def _read_preview(stream: BinaryIO) -> bytes:
    parts: list[bytes] = []
    remaining = _PREVIEW_SIZE
    while remaining > 0:
        data = stream.read(remaining)
        if not data:
            break
        parts.append(data)
        remaining -= len(data)
    return b"".join(parts)


def new_reader(stream: BinaryIO, content_type: str = "") -> io.BufferedReader:
    """Return a binary reader yielding the content of ``stream`` as UTF-8.

    The encoding is found with :func:`determine_encoding`.  Raises
    EOFError if ``stream`` is empty.
    """
    preview = _read_preview(stream)
    if not preview:
        raise EOFError("EOF")
    rest = stream if len(preview) == _PREVIEW_SIZE else None
    source = _PrefixedReader(preview, rest)
    enc, _, _ = determine_encoding(preview, content_type)
    if enc is _NOP:
        return io.BufferedReader(source)
    return io.BufferedReader(_DecodingReader(source, enc))


def new_reader_label(label: str, stream: BinaryIO) -> io.BufferedReader:
    """Return a reader converting ``stream`` from charset ``label`` to UTF-8.

    Raises ValueError if the label is not a known encoding.
    """
    enc, _ = lookup(label)
    if enc is None:
        raise ValueError(f"unsupported charset: {label!r}")
    return io.BufferedReader(_DecodingReader(_PrefixedReader(b"", stream), enc))


_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


class _MetaFound(Exception):
    def __init__(self, encoding: HTMLEncoding, name: str) -> None:
        super().__init__(name)
        self.encoding = encoding
        self.name = name


class _MetaScanner(HTMLParser):
    def handle_starttag(self, tag, attrs) -> None:
        if tag == "meta":
            self._meta(attrs)

    def handle_startendtag(self, tag, attrs) -> None:
        if tag == "meta":
            self._meta(attrs)

    def _meta(self, attrs) -> None:
        seen: set[str] = set()
        got_pragma = False
        need_pragma: bool | None = None
        name = ""
        enc: HTMLEncoding | None = None
        for key, raw in attrs:
            if key in seen:
                continue
            seen.add(key)
            val = (raw or "").translate(_ASCII_LOWER)
            if key == "http-equiv":
                if val == "content-type":
                    got_pragma = True
            elif key == "content":
                if enc is None:
                    name = from_meta_element(val)
                    if name:
                        enc, name = lookup(name)
                        if enc is not None:
                            need_pragma = True
            elif key == "charset":
                enc, name = lookup(val)
                need_pragma = False

        if need_pragma is None or (need_pragma and not got_pragma):
            return
        if name.startswith("utf-16"):
            name = "utf-8"
            enc = _NOP
        if enc is not None:
            raise _MetaFound(enc, name)


def _prescan(content: bytes) -> tuple[HTMLEncoding | None, str]:
    scanner = _MetaScanner()
    try:
        scanner.feed(content.decode("latin-1"))
    except _MetaFound as found:
        return found.encoding, found.name
    return None, ""


def from_meta_element(s: str) -> str:
    """Extract the charset value from a meta element's ``content`` attribute."""
    while s:
        loc = s.find("charset")
        if loc == -1:
            return ""
        s = s[loc + len("charset"):].lstrip(_HTML_SPACE)
        if not s.startswith("="):
            continue
        s = s[1:].lstrip(_HTML_SPACE)
        if not s:
            return ""
        quote = s[0]
        if quote in "\"'":
            s = s[1:]
            close = s.find(quote)
            if close == -1:
                return ""
            return s[:close]
        end = next((i for i, c in enumerate(s) if c in ";" + _HTML_SPACE), len(s))
        return s[:end]
    return ""