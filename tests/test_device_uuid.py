import pytest

from vkmark.device_uuid import UUID_SIZE, DeviceUUID


def test_default_is_all_zero():
    assert DeviceUUID().representation() == "0" * (2 * UUID_SIZE)


def test_representation_of_known_bytes():
    uuid = DeviceUUID(bytes(range(16)))
    assert uuid.representation() == "000102030405060708090a0b0c0d0e0f"


def test_round_trip_from_representation():
    text = "ff00a1b2c3d4e5f60718293a4b5c6d7e"
    uuid = DeviceUUID.from_representation(text)
    assert uuid.representation() == text
    assert DeviceUUID(uuid.raw) == uuid


def test_round_trip_from_bytes():
    raw = bytes(reversed(range(200, 216)))
    uuid = DeviceUUID(raw)
    assert DeviceUUID.from_representation(uuid.representation()) == uuid
    assert bytes(uuid) == raw


def test_equality_depends_on_bytes():
    a = DeviceUUID(bytes(range(16)))
    b = DeviceUUID(bytearray(range(16)))
    c = DeviceUUID(bytes(range(1, 17)))
    assert a == b
    assert not (a == c)


@pytest.mark.parametrize("text", ["", "abc", "0" * 31, "0" * 33])
def test_wrong_size_representation_raises(text):
    with pytest.raises(ValueError, match="wrong size"):
        DeviceUUID.from_representation(text)


@pytest.mark.parametrize("bad", ["A", "g", " ", "-"])
def test_invalid_character_raises(bad):
    text = bad + "0" * (2 * UUID_SIZE - 1)
    with pytest.raises(ValueError, match="hexadecimal"):
        DeviceUUID.from_representation(text)


def test_wrong_raw_size_raises():
    with pytest.raises(ValueError):
        DeviceUUID(bytes(15))