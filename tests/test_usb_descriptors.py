import pytest

from avrcore.usb_descriptors import (
    CDC_CS_INTERFACE,
    CDC_HEADER,
    ConfigDescriptor,
    CDCCSInterfaceDescriptor,
    DeviceDescriptor,
    EndpointDescriptor,
    IADDescriptor,
    InterfaceDescriptor,
    SetupPacket,
    USB_CONFIG_BUS_POWERED,
    USB_CONFIG_POWER,
    USB_CONFIG_REMOTE_WAKEUP,
    USB_ENDPOINT_TYPE_BULK,
    USB_VERSION,
    config_power_ma,
    endpoint_in,
    endpoint_out,
)


def test_setup_packet_round_trip():
    packet = SetupPacket(0xA1, 0x21, 0x34, 0x12, 0x0001, 0x0007)
    raw = packet.pack()
    assert len(raw) == 8
    assert SetupPacket.unpack(raw) == packet


def test_setup_packet_w_value_combines_bytes():
    packet = SetupPacket(0x21, 0x23, w_value_l=0xCD, w_value_h=0xAB)
    assert packet.w_value == (0xAB << 8) | 0xCD


def test_setup_packet_unpack_short_data_raises():
    with pytest.raises(ValueError):
        SetupPacket.unpack(b"\x00\x01\x02")


def test_setup_packet_unpack_ignores_trailing_bytes():
    packet = SetupPacket(0x80, 6, 0, 1, 0, 18)
    assert SetupPacket.unpack(packet.pack() + b"\xff\xff") == packet


def test_device_descriptor_layout():
    desc = DeviceDescriptor(0xEF, 0x02, 0x01, 64, 0x1234, 0x5678, 0x100, 1, 2, 3, 1)
    raw = desc.pack()
    assert len(raw) == 18
    assert raw[0] == 18
    assert raw[1] == 1
    assert int.from_bytes(raw[2:4], "little") == USB_VERSION
    assert int.from_bytes(raw[8:10], "little") == 0x1234
    assert int.from_bytes(raw[10:12], "little") == 0x5678
    assert raw[-1] == 1


def test_config_descriptor_defaults():
    raw = ConfigDescriptor(total_length=75, num_interfaces=2).pack()
    assert len(raw) == 9
    assert raw[0] == 9
    assert raw[1] == 2
    assert int.from_bytes(raw[2:4], "little") == 75
    assert raw[4] == 2
    assert raw[7] == USB_CONFIG_BUS_POWERED | USB_CONFIG_REMOTE_WAKEUP
    assert raw[8] == config_power_ma(USB_CONFIG_POWER)


def test_config_power_ma_halves():
    assert config_power_ma(USB_CONFIG_POWER) == 250
    assert config_power_ma(100) * 2 == 100


def test_interface_descriptor_bytes():
    raw = InterfaceDescriptor(1, 2, 0x0A, 0, 0).pack()
    assert raw == bytes([9, 4, 1, 0, 2, 0x0A, 0, 0, 0])


def test_endpoint_descriptor_layout():
    raw = EndpointDescriptor(endpoint_in(3), USB_ENDPOINT_TYPE_BULK, 64, 0).pack()
    assert len(raw) == 7
    assert raw[0] == 7
    assert raw[1] == 5
    assert raw[2] == endpoint_in(3)
    assert raw[3] == USB_ENDPOINT_TYPE_BULK
    assert int.from_bytes(raw[4:6], "little") == 64


def test_iad_descriptor_bytes():
    raw = IADDescriptor(0, 2, 0x02, 0x02, 0).pack()
    assert raw == bytes([8, 11, 0, 2, 0x02, 0x02, 0, 0])


def test_cdccs_descriptor_variants():
    five = CDCCSInterfaceDescriptor(CDC_HEADER, 0x10, 0x01)
    four = CDCCSInterfaceDescriptor(0x02, 6)
    assert five.pack() == bytes([5, CDC_CS_INTERFACE, CDC_HEADER, 0x10, 0x01])
    assert four.pack() == bytes([4, CDC_CS_INTERFACE, 0x02, 6])
    assert five.length == len(five.pack())
    assert four.length == len(four.pack())


def test_endpoint_direction_helpers():
    for address in range(8):
        assert endpoint_in(address) & 0x80
        assert endpoint_in(address) & 0x7F == address
        assert endpoint_out(address) == address


def test_out_of_range_field_raises_value_error():
    with pytest.raises(ValueError):
        InterfaceDescriptor(256, 1, 0, 0, 0).pack()
    with pytest.raises(ValueError):
        SetupPacket(-1, 0).pack()