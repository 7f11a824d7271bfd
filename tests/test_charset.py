from nnumber.core import charset as cs


def test_alphabets() -> None:
    assert len(cs.charset) == 24
    assert "I" not in cs.charset and "O" not in cs.charset
    assert cs.allchars == cs.charset + "0123456789"
    assert len(cs.hexset) == 16


def test_buckets() -> None:
    assert cs.suffix_size == 601
    assert cs.bucket4_size == 35
    assert cs.bucket3_size == 951
    assert cs.bucket2_size == 10111
    assert cs.bucket1_size == 101711
    assert cs.MAX_VALUE == 0xDF7C7
