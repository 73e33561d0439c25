"""Generator interface: word outputs, byte fills and their consistency."""

import numpy as np
import pytest

from xorwow import VARIANTS, LargeXor, WrapB, Xorwow160, XorwowXor160, os_entropy

MASK32 = 0xFFFFFFFF

ALL = sorted(VARIANTS)


def _pair(name, seed=0xDEADBEEF):
    cls = VARIANTS[name]
    return cls.seed_from_u64(seed), cls.seed_from_u64(seed)


@pytest.mark.parametrize("name", ALL)
def test_deterministic_streams(name):
    first, second = _pair(name, 0xA2B94D10)
    assert [first.next_u32() for _ in range(10_000)] == [
        second.next_u32() for _ in range(10_000)
    ]


@pytest.mark.parametrize("name", ALL)
@pytest.mark.parametrize("seed", [0, 1, 0xFFFFFFFFFFFFFFFF])
def test_streams_not_degenerate(name, seed):
    rng = VARIANTS[name].seed_from_u64(seed)
    outputs = [rng.next_u32() for _ in range(10_000)]
    assert any(outputs)
    assert len(set(outputs)) > 9_000
    assert any(rng.dump_state()[:-1])


@pytest.mark.parametrize("name", ALL)
def test_u64_words_match_filled_bytes(name):
    words_rng, bytes_rng = _pair(name)
    n = 64
    words = b"".join(words_rng.next_u64().to_bytes(8, "little") for _ in range(n))
    buf = bytearray(8 * n)
    bytes_rng.fill_bytes(buf)

    assert bytes(buf) == words
    assert words_rng == bytes_rng


@pytest.mark.parametrize("name", ALL)
def test_short_tail_consumes_one_u32(name):
    explicit, filled = _pair(name)
    expected = explicit.next_u64().to_bytes(8, "little") + explicit.next_u32().to_bytes(4, "little")[:3]

    assert filled.random_bytes(11) == expected
    assert explicit.next_u32() == filled.next_u32()


@pytest.mark.parametrize("name", ALL)
def test_long_tail_consumes_one_u64(name):
    explicit, filled = _pair(name)
    expected = explicit.next_u64().to_bytes(8, "little")[:6]

    assert filled.random_bytes(6) == expected
    assert explicit.next_u64() == filled.next_u64()


def test_mixed_calls_stay_in_lockstep():
    left, right = _pair("xorwow192")
    left.fill_bytes(bytearray(13))
    left.next_u32()
    left.fill_bytes(bytearray(4))

    right.next_u64()
    right.next_u64()
    right.next_u32()
    right.next_u32()
    assert left == right


def test_empty_buffer_does_not_advance():
    rng, twin = _pair("wrap_a")
    rng.fill_bytes(bytearray())
    assert rng == twin


def test_fill_rejects_read_only_buffer():
    rng = Xorwow160.seed_from_u64(1)
    with pytest.raises(TypeError):
        rng.fill_bytes(b"\x00" * 8)


def test_try_fill_bytes_matches_fill_bytes():
    left, right = _pair("large_wrap")
    a, b = bytearray(37), bytearray(37)
    assert left.try_fill_bytes(a) is None
    right.fill_bytes(b)
    assert a == b


def test_fill_numpy_array_in_place():
    rng, twin = _pair("xorwow160")
    arr = np.zeros(4, dtype=np.uint64)
    rng.fill_bytes(arr)
    assert [int(word) for word in arr] == [twin.next_u64() for _ in range(4)]


def test_u64_from_32bit_lanes_is_single_transition():
    rng, twin = _pair("xorwow160")
    word = rng.next_u64()
    *lanes, counter = rng.dump_state()

    assert word & MASK32 == (lanes[0] + counter) & MASK32
    assert word >> 32 == (lanes[1] + counter) & MASK32
    assert twin.next_u32() == word & MASK32
    assert twin == rng


def test_xor_combiner_used_for_both_halves():
    rng = XorwowXor160.seed_from_u64(77)
    word = rng.next_u64()
    *lanes, counter = rng.dump_state()
    assert word == ((lanes[1] ^ counter) << 32) | (lanes[0] ^ counter)


@pytest.mark.parametrize("name", ["wrap_a", "wrap_b", "xor_a", "xor_b", "large_wrap", "large_xor"])
def test_u32_truncates_64bit_output(name):
    narrow, wide = _pair(name)
    for _ in range(100):
        assert narrow.next_u32() == wide.next_u64() & MASK32


def test_large_variant_outputs_shifted_lane():
    rng = LargeXor.seed_from_u64(99)
    before = rng.dump_state()
    word = rng.next_u64()
    s0, _, counter = rng.dump_state()
    assert s0 == before[1]
    assert word == s0 ^ counter


def test_random_raw_shapes():
    rng, twin = _pair("wrap_b")
    assert rng.random_raw() == twin.next_u64()

    block = rng.random_raw((2, 3))
    assert block.shape == (2, 3)
    assert block.dtype == np.uint64
    assert [int(word) for word in block.ravel()] == [twin.next_u64() for _ in range(6)]
    assert rng.random_raw(0).shape == (0,)


def test_copy_is_independent():
    rng = WrapB.seed_from_u64(5)
    clone = rng.copy()
    assert clone == rng
    rng.next_u32()
    assert clone != rng
    clone.next_u32()
    assert clone == rng


def test_equality_requires_same_variant():
    assert Xorwow160.seed_from_u64(3) != XorwowXor160.seed_from_u64(3)


def test_counter_wraps_without_error():
    rng = Xorwow160.seed_from_raw_state(b"\x01" * 20 + b"\xff" * 4)
    rng.next_u32()
    assert rng.dump_state()[-1] == 362437 - 1


def test_os_entropy_length():
    assert len(os_entropy(24)) == 24


@pytest.mark.parametrize("name", ["xorwow128", "wrap_a", "large_wrap"])
def test_no_return_to_initial_state_within_2_pow_20(name):
    rng = VARIANTS[name].seed_from_u64(123456789)
    initial = rng.dump_state()
    for _ in range(1 << 20):
        rng.next_u32()
        assert rng.dump_state() != initial
