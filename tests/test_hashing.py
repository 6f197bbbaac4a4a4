import pytest

from contestkit.hashing import hash_pair, hash_sequence


def test_empty_sequence_hashes_to_seed():
    assert hash_sequence([]) == 0


def test_single_zero_is_golden_constant():
    assert hash_sequence([0]) == 0x9E3779B9


def test_sequence_hash_is_order_sensitive():
    assert hash_sequence([1, 2, 3]) != hash_sequence([3, 2, 1])
    assert hash_sequence([1, 2, 3]) == hash_sequence((1, 2, 3))


def test_sequence_hash_fits_64_bits():
    h = hash_sequence(range(-50, 1000))
    assert 0 <= h < 2**64


def test_pair_hash_is_symmetric_and_cancels():
    assert hash_pair((3, 9)) == hash_pair((9, 3))
    assert hash_pair((42, 42)) == 0
    assert hash_pair((7, 0)) == 7


def test_rejects_non_integers():
    with pytest.raises(TypeError):
        hash_sequence([1.5])
    with pytest.raises(TypeError):
        hash_pair(("a", 1))