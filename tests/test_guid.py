import pytest

from pfckit.guid import GUID_NULL, Guid, guid_compare, print_hex_raw

SAMPLE = Guid(0xB296CF59, 0x4D51, 0x466F, bytes([0x8E, 0x0B, 0xE5, 0x7D, 0x3F, 0x91, 0xD9, 0x08]))


def test_from_text_with_braces():
    assert Guid.from_text("{B296CF59-4D51-466f-8E0B-E57D3F91D908}") == SAMPLE


def test_str_format():
    assert str(SAMPLE) == "B296CF59-4D51-466F-8E0B-E57D3F91D908"


def test_text_round_trip():
    assert Guid.from_text(str(SAMPLE)) == SAMPLE
    g = Guid.create()
    assert Guid.from_text(str(g)) == g


def test_from_text_without_dashes():
    assert Guid.from_text("B296CF594D51466F8E0BE57D3F91D908") == SAMPLE


def test_from_text_truncated_leaves_rest_zero():
    g = Guid.from_text("B296CF59-4D51")
    assert g.data1 == SAMPLE.data1
    assert g.data2 == SAMPLE.data2
    assert g.data3 == 0
    assert g.data4 == bytes(8)


def test_from_text_invalid_digits_read_as_zero():
    g = Guid.from_text("zzzzzzzz-0000-0000-0000-000000000000")
    assert g == GUID_NULL


def test_bytes_round_trip_and_layout():
    raw = SAMPLE.to_bytes()
    assert len(raw) == 16
    assert int.from_bytes(raw[0:4], "little") == SAMPLE.data1
    assert raw[8:] == SAMPLE.data4
    assert Guid.from_bytes(raw) == SAMPLE


def test_from_bytes_wrong_length():
    with pytest.raises(ValueError):
        Guid.from_bytes(b"\x00" * 15)


def test_invalid_fields_rejected():
    with pytest.raises(ValueError):
        Guid(0, 0, 0, b"\x00" * 7)
    with pytest.raises(ValueError):
        Guid(1 << 32)


def test_create_round_trips_through_bytes():
    g = Guid.create()
    assert Guid.from_bytes(g.to_bytes()) == g


def test_byteswap_is_involution():
    swapped = SAMPLE.byteswap()
    assert swapped.byteswap() == SAMPLE
    assert swapped.data1.to_bytes(4, "big") == SAMPLE.data1.to_bytes(4, "little")
    assert swapped.data4 == SAMPLE.data4


def test_xor():
    assert SAMPLE ^ SAMPLE == GUID_NULL
    assert SAMPLE ^ GUID_NULL == SAMPLE
    other = Guid.create()
    assert (SAMPLE ^ other) ^ other == SAMPLE


def test_ordering_follows_bytes():
    items = [Guid.create() for _ in range(10)] + [GUID_NULL, SAMPLE]
    ordered = sorted(items)
    assert [g.to_bytes() for g in ordered] == sorted(g.to_bytes() for g in items)
    assert guid_compare(SAMPLE, SAMPLE) == 0
    assert guid_compare(GUID_NULL, SAMPLE) == -1
    assert guid_compare(SAMPLE, GUID_NULL) == 1


def test_format_cpp():
    assert SAMPLE.format_cpp() == (
        "{0xB296CF59, 0x4D51, 0x466F, {0x8E, 0x0B, 0xE5, 0x7D, 0x3F, 0x91, 0xD9, 0x08}}"
    )


def test_print_hex_raw():
    assert print_hex_raw(b"\x00\xff\x10") == "00FF10"
    assert print_hex_raw(SAMPLE.data4) == str(SAMPLE).split("-", 3)[3].replace("-", "")