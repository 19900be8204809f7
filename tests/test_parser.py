# File: tests/test_parser.py
import pytest

from js_sifter.errors import ParseError
from js_sifter.extract.walker import walk
from js_sifter.parser.js_parser import decode_source, parse_script


def test_parses_bytes():
    tree = parse_script(b'f("bytes");')
    assert walk(tree) == ["bytes"]


def test_bom_is_stripped():
    assert decode_source(b'\xef\xbb\xbff("x");') == 'f("x");'


def test_invalid_utf8_is_replaced():
    assert decode_source(b'f("\xff");') == 'f("\ufffd");'


def test_syntax_error_raises_parse_error():
    with pytest.raises(ParseError) as exc_info:
        parse_script("function (", url="https://example.com/bad.js")
    assert exc_info.value.url == "https://example.com/bad.js"
    assert exc_info.value.reason


def test_module_syntax_needs_module_source_type():
    source = 'import x from "./dep.js"; x("live");'
    with pytest.raises(ParseError):
        parse_script(source)
    assert walk(parse_script(source, source_type="module")) == ["live"]
