import pytest

from algonotes.huffman import build_huffman_code, main

TEXTS = ["ab", "aab", "abc", "abracadabra", "mississippi", "thequickbrownfoxjumpsoverthelazydog"]


def _encode(code, text):
    return "".join(code.codes[ch] for ch in text)


def test_two_equal_symbols_first_seen_gets_zero():
    code = build_huffman_code("ab")
    assert code.codes == {"a": "0", "b": "1"}


def test_order_is_by_frequency_then_first_appearance():
    code = build_huffman_code("aab")
    assert list(code.codes) == ["b", "a"]
    assert code.frequencies == {"b": 1, "a": 2}


@pytest.mark.parametrize("text", TEXTS)
def test_round_trip(text):
    code = build_huffman_code(text)
    assert code.decode(_encode(code, text)) == text


@pytest.mark.parametrize("text", TEXTS)
def test_codes_are_prefix_free(text):
    codes = list(build_huffman_code(text).codes.values())
    for i, first in enumerate(codes):
        for j, second in enumerate(codes):
            if i != j:
                assert not second.startswith(first)


@pytest.mark.parametrize("text", TEXTS)
def test_sizes_match_encoding(text):
    code = build_huffman_code(text)
    bits = _encode(code, text)
    assert code.length == len(text)
    assert code.total_bits == len(bits)
    assert code.encoded_bytes * 8 >= len(bits) > (code.encoded_bytes - 1) * 8


@pytest.mark.parametrize("text", TEXTS)
def test_more_frequent_symbols_get_no_longer_codes(text):
    code = build_huffman_code(text)
    for a, count_a in code.frequencies.items():
        for b, count_b in code.frequencies.items():
            if count_a > count_b:
                assert len(code.codes[a]) <= len(code.codes[b])


def test_single_symbol_text():
    code = build_huffman_code("aaaa")
    assert code.codes == {"a": ""}
    assert code.decode("") == ""
    with pytest.raises(ValueError):
        code.decode("0")


def test_incomplete_bits_are_invalid():
    code = build_huffman_code("abc")
    longest = max(code.codes.values(), key=len)
    with pytest.raises(ValueError):
        code.decode(longest[:-1])


@pytest.mark.parametrize("text", ["", "Abc", "a b", "abc1"])
def test_rejects_bad_text(text):
    with pytest.raises(ValueError):
        build_huffman_code(text)


def test_main_output(capsys):
    text = "abracadabra"
    code = build_huffman_code(text)
    valid = _encode(code, "cab")
    invalid = max(code.codes.values(), key=len)[:-1]
    assert main([text, valid, invalid]) == 0
    lines = capsys.readouterr().out.splitlines()
    expected = [f"{code.length} {code.encoded_bytes}"]
    expected += [f"{symbol}:{bits}" for symbol, bits in code.codes.items()]
    expected += ["cab", "INVALID"]
    assert lines == expected


def test_main_missing_codes_decode_empty(capsys):
    assert main(["abc"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[-2:] == ["", ""]


def test_main_rejects_bad_text(capsys):
    assert main(["ABC"]) == 1
    assert capsys.readouterr().out == ""