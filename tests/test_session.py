# tests/test_session.py
import sys, os
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pytest

from huffkit.errors import NoTreeAvailableError, SymbolNotInTableError
from huffkit.session import HuffmanCoder, HuffmanSession


def test_build_code_and_accessors():
    coder = HuffmanCoder()
    codes = coder.build_code("aabbbccd")
    assert codes == {"d": "00", "a": "01", "c": "10", "b": "11"}
    assert dict(coder.codes) == codes
    assert coder.original == "aabbbccd"
    assert coder.encoded == ""


def test_codes_accessor_is_read_only():
    coder = HuffmanCoder()
    coder.build_code("abc")
    with pytest.raises(TypeError):
        coder.codes["z"] = "1"


def test_encode_builds_table_when_missing():
    coder = HuffmanCoder()
    bits = coder.encode("aaaa")
    assert bits == "0000"
    assert dict(coder.codes) == {"a": "0"}
    assert coder.encoded == "0000"
    assert coder.decode("0000") == "aaaa"


@pytest.mark.parametrize("text", ["x", "abracadabra", "Hello World\nsecond line", "你好 hello"])
def test_roundtrip(text):
    coder = HuffmanCoder()
    assert coder.decode(coder.encode(text)) == text


def test_empty_input_is_noop():
    coder = HuffmanCoder()
    assert coder.build_code("") == {}
    assert coder.encode("") == ""
    assert not coder.session.has_tree


def test_build_code_replaces_previous_session():
    coder = HuffmanCoder()
    coder.encode("aaaa")
    coder.build_code("abc")
    assert set(coder.codes) == {"a", "b", "c"}
    assert coder.original == "abc"
    assert coder.encoded == ""


def test_encode_with_stale_table_raises():
    coder = HuffmanCoder()
    coder.build_code("abc")
    with pytest.raises(SymbolNotInTableError):
        coder.encode("abd")


def test_encode_reuses_table_for_compatible_text():
    coder = HuffmanCoder()
    coder.build_code("aabbbccd")
    bits = coder.encode("dcba")
    assert bits == "00101101"
    assert coder.original == "dcba"
    assert coder.decode(bits) == "dcba"


def test_decode_before_build_raises():
    coder = HuffmanCoder()
    with pytest.raises(NoTreeAvailableError):
        coder.decode("0101")


def test_statistics_before_build_raise():
    coder = HuffmanCoder()
    with pytest.raises(NoTreeAvailableError):
        coder.average_code_length()
    with pytest.raises(NoTreeAvailableError):
        coder.efficiency()
    with pytest.raises(NoTreeAvailableError):
        coder.entropy()
    with pytest.raises(NoTreeAvailableError):
        coder.compression_ratio()


def test_compression_ratio_needs_encoded_output():
    coder = HuffmanCoder()
    coder.build_code("abc")
    with pytest.raises(NoTreeAvailableError):
        coder.compression_ratio()


def test_entropy_with_explicit_text_needs_no_session():
    coder = HuffmanCoder()
    assert coder.entropy("abcd") == pytest.approx(2.0)
    assert coder.entropy("") == 0.0


def test_session_statistics():
    coder = HuffmanCoder()
    coder.encode("aabbbccd")
    assert coder.entropy() == pytest.approx(1.906, abs=1e-3)
    assert coder.average_code_length() == pytest.approx(2.0)
    assert coder.efficiency() == pytest.approx(100 * coder.entropy() / 2.0)
    assert coder.compression_ratio() == pytest.approx(75.0)


def test_compression_ratio_single_symbol():
    coder = HuffmanCoder()
    bits = coder.encode("aaaaaaaa")
    assert len(bits) == 8
    stats = coder.statistics()
    assert stats["original_bits"] == 64
    assert stats["compression_ratio"] == pytest.approx(87.5)
    assert stats["efficiency"] == 0.0


def test_reset_discards_state():
    coder = HuffmanCoder()
    coder.encode("abc")
    coder.reset()
    assert dict(coder.codes) == {}
    assert coder.original == ""
    assert coder.encoded == ""
    with pytest.raises(NoTreeAvailableError):
        coder.decode("0")


def test_caller_owned_sessions_are_independent():
    s1, s2 = HuffmanSession(), HuffmanSession()
    HuffmanCoder(s1).encode("aaaa")
    HuffmanCoder(s2).encode("abab")
    assert s1.codes == {"a": "0"}
    assert set(s2.codes) == {"a", "b"}
    # 同一个 session 可以交给新的 coder 继续用
    assert HuffmanCoder(s1).decode("00") == "aa"
