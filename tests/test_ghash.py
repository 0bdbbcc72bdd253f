import pytest

from galoisaead.ghash import GHash

H_ONE = bytes.fromhex("66e94bd4ef8a2c3b884cfa59ca342b2e")


def test_known_value_from_gcm_specification():
    g = GHash(H_ONE)
    g.update(bytes.fromhex("0388dace60b6a392f328c2b971b2fe78"))
    g.update(bytes.fromhex("00000000000000000000000000000080"))
    assert g.finalize() == bytes.fromhex("f38cbb1ad69223dcc3457ae5b6b0f885")


def test_empty_input_hashes_to_zero():
    assert GHash(H_ONE).finalize() == bytes(16)


def test_zero_key_yields_zero():
    g = GHash(bytes(16))
    g.update(bytes(range(32)))
    assert g.finalize() == bytes(16)


def test_update_padded_matches_explicit_padding():
    data = b"seventeen bytes!!"
    a = GHash(H_ONE)
    a.update_padded(data)
    b = GHash(H_ONE)
    b.update(data + bytes(15))
    assert a.finalize() == b.finalize()


def test_update_in_pieces_matches_single_update():
    data = bytes(range(48))
    a = GHash(H_ONE)
    a.update(data)
    b = GHash(H_ONE)
    b.update(data[:16])
    b.update(data[16:])
    assert a.finalize() == b.finalize()


def test_single_block_is_linear():
    x = bytes(range(16))
    y = bytes(range(100, 116))
    xy = bytes(p ^ q for p, q in zip(x, y))

    def digest(block):
        g = GHash(H_ONE)
        g.update(block)
        return g.finalize()

    combined = bytes(p ^ q for p, q in zip(digest(x), digest(y)))
    assert digest(xy) == combined


def test_copy_is_independent():
    g = GHash(H_ONE)
    g.update(bytes(range(16)))
    snapshot = g.copy()
    before = g.finalize()
    g.update(bytes(range(16, 32)))
    assert snapshot.finalize() == before
    assert g.finalize() != before


def test_update_rejects_partial_block():
    with pytest.raises(ValueError):
        GHash(H_ONE).update(b"short")


def test_key_must_be_sixteen_bytes():
    with pytest.raises(ValueError):
        GHash(bytes(15))