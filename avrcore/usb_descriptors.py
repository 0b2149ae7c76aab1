"""USB request constants, the setup packet and the standard descriptor layouts."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import ClassVar

# Standard requests
GET_STATUS = 0
CLEAR_FEATURE = 1
SET_FEATURE = 3
SET_ADDRESS = 5
GET_DESCRIPTOR = 6
SET_DESCRIPTOR = 7
GET_CONFIGURATION = 8
SET_CONFIGURATION = 9
GET_INTERFACE = 10
SET_INTERFACE = 11

# bmRequestType
REQUEST_HOSTTODEVICE = 0x00
REQUEST_DEVICETOHOST = 0x80
REQUEST_DIRECTION = 0x80

REQUEST_STANDARD = 0x00
REQUEST_CLASS = 0x20
REQUEST_VENDOR = 0x40
REQUEST_TYPE = 0x60

REQUEST_DEVICE = 0x00
REQUEST_INTERFACE = 0x01
REQUEST_ENDPOINT = 0x02
REQUEST_OTHER = 0x03
REQUEST_RECIPIENT = 0x03

REQUEST_DEVICETOHOST_CLASS_INTERFACE = REQUEST_DEVICETOHOST | REQUEST_CLASS | REQUEST_INTERFACE
REQUEST_HOSTTODEVICE_CLASS_INTERFACE = REQUEST_HOSTTODEVICE | REQUEST_CLASS | REQUEST_INTERFACE
REQUEST_DEVICETOHOST_STANDARD_INTERFACE = (
    REQUEST_DEVICETOHOST | REQUEST_STANDARD | REQUEST_INTERFACE
)

# Class requests
CDC_SET_LINE_CODING = 0x20
CDC_GET_LINE_CODING = 0x21
CDC_SET_CONTROL_LINE_STATE = 0x22
CDC_SEND_BREAK = 0x23

MSC_RESET = 0xFF
MSC_GET_MAX_LUN = 0xFE

# Descriptors
USB_DEVICE_DESC_SIZE = 18
USB_CONFIGUARTION_DESC_SIZE = 9
USB_INTERFACE_DESC_SIZE = 9
USB_ENDPOINT_DESC_SIZE = 7

USB_DEVICE_DESCRIPTOR_TYPE = 1
USB_CONFIGURATION_DESCRIPTOR_TYPE = 2
USB_STRING_DESCRIPTOR_TYPE = 3
USB_INTERFACE_DESCRIPTOR_TYPE = 4
USB_ENDPOINT_DESCRIPTOR_TYPE = 5
USB_IAD_DESCRIPTOR_TYPE = 11

# Standard feature selectors
DEVICE_REMOTE_WAKEUP = 1
ENDPOINT_HALT = 2
TEST_MODE = 3

# GetStatus() bits for a device
FEATURE_SELFPOWERED_ENABLED = 1 << 0
FEATURE_REMOTE_WAKEUP_ENABLED = 1 << 1

USB_DEVICE_CLASS_COMMUNICATIONS = 0x02
USB_DEVICE_CLASS_HUMAN_INTERFACE = 0x03
USB_DEVICE_CLASS_STORAGE = 0x08
USB_DEVICE_CLASS_VENDOR_SPECIFIC = 0xFF

USB_CONFIG_POWERED_MASK = 0x40
USB_CONFIG_BUS_POWERED = 0x80
USB_CONFIG_SELF_POWERED = 0xC0
USB_CONFIG_REMOTE_WAKEUP = 0x20
USB_CONFIG_POWER = 500

USB_ENDPOINT_DIRECTION_MASK = 0x80

USB_ENDPOINT_TYPE_MASK = 0x03
USB_ENDPOINT_TYPE_CONTROL = 0x00
USB_ENDPOINT_TYPE_ISOCHRONOUS = 0x01
USB_ENDPOINT_TYPE_BULK = 0x02
USB_ENDPOINT_TYPE_INTERRUPT = 0x03

CDC_V1_10 = 0x0110
CDC_COMMUNICATION_INTERFACE_CLASS = 0x02

CDC_CALL_MANAGEMENT = 0x01
CDC_ABSTRACT_CONTROL_MODEL = 0x02
CDC_HEADER = 0x00
CDC_ABSTRACT_CONTROL_MANAGEMENT = 0x02
CDC_UNION = 0x06
CDC_CS_INTERFACE = 0x24
CDC_CS_ENDPOINT = 0x25
CDC_DATA_INTERFACE_CLASS = 0x0A

MSC_SUBCLASS_SCSI = 0x06
MSC_PROTOCOL_BULK_ONLY = 0x50

USB_VERSION = 0x200

# Bootloader hand-off
MAGIC_KEY = 0x7777
MAGIC_KEY_POS = 0x0800
NEW_LUFA_SIGNATURE = 0xDCFB


def _pack(fmt: str, *values: int) -> bytes:
    try:
        return struct.pack(fmt, *values)
    except struct.error as exc:
        raise ValueError(f"descriptor field out of range: {exc}") from exc


def endpoint_in(address: int) -> int:
    """Endpoint address with the IN direction bit set."""
    return (address | USB_ENDPOINT_DIRECTION_MASK) & 0xFF


def endpoint_out(address: int) -> int:
    """Endpoint address for the OUT direction."""
    return address & 0xFF


def config_power_ma(milliamps: int) -> int:
    """The bMaxPower value for a current draw given in milliamps."""
    return milliamps // 2


@dataclass
class SetupPacket:
    """The 8-byte control request that opens every control transfer."""

    bm_request_type: int
    b_request: int
    w_value_l: int = 0
    w_value_h: int = 0
    w_index: int = 0
    w_length: int = 0

    _FORMAT: ClassVar[str] = "<BBBBHH"
    SIZE: ClassVar[int] = 8

    @classmethod
    def unpack(cls, data: bytes) -> "SetupPacket":
        """Decode the first 8 bytes of ``data``."""
        if len(data) < cls.SIZE:
            raise ValueError(f"setup packet needs {cls.SIZE} bytes, got {len(data)}")
        return cls(*struct.unpack_from(cls._FORMAT, data))

    def pack(self) -> bytes:
        return _pack(
            self._FORMAT,
            self.bm_request_type,
            self.b_request,
            self.w_value_l,
            self.w_value_h,
            self.w_index,
            self.w_length,
        )

    @property
    def w_value(self) -> int:
        return (self.w_value_h << 8) | self.w_value_l


@dataclass
class DeviceDescriptor:
    """Standard device descriptor (18 bytes)."""

    device_class: int
    device_subclass: int
    device_protocol: int
    packet_size0: int
    id_vendor: int
    id_product: int
    device_version: int
    i_manufacturer: int
    i_product: int
    i_serial_number: int
    num_configurations: int
    usb_version: int = USB_VERSION

    LENGTH: ClassVar[int] = USB_DEVICE_DESC_SIZE
    TYPE: ClassVar[int] = USB_DEVICE_DESCRIPTOR_TYPE

    def pack(self) -> bytes:
        return _pack(
            "<BBHBBBBHHHBBBB",
            self.LENGTH,
            self.TYPE,
            self.usb_version,
            self.device_class,
            self.device_subclass,
            self.device_protocol,
            self.packet_size0,
            self.id_vendor,
            self.id_product,
            self.device_version,
            self.i_manufacturer,
            self.i_product,
            self.i_serial_number,
            self.num_configurations,
        )


@dataclass
class ConfigDescriptor:
    """Configuration descriptor header (9 bytes)."""

    total_length: int
    num_interfaces: int
    config: int = 1
    i_config: int = 0
    attributes: int = USB_CONFIG_BUS_POWERED | USB_CONFIG_REMOTE_WAKEUP
    max_power: int = config_power_ma(USB_CONFIG_POWER)

    LENGTH: ClassVar[int] = USB_CONFIGUARTION_DESC_SIZE
    TYPE: ClassVar[int] = USB_CONFIGURATION_DESCRIPTOR_TYPE

    def pack(self) -> bytes:
        return _pack(
            "<BBHBBBBB",
            self.LENGTH,
            self.TYPE,
            self.total_length,
            self.num_interfaces,
            self.config,
            self.i_config,
            self.attributes,
            self.max_power,
        )


@dataclass
class InterfaceDescriptor:
    """Interface descriptor (9 bytes)."""

    number: int
    num_endpoints: int
    interface_class: int
    interface_subclass: int
    protocol: int
    alternate: int = 0
    i_interface: int = 0

    LENGTH: ClassVar[int] = USB_INTERFACE_DESC_SIZE
    TYPE: ClassVar[int] = USB_INTERFACE_DESCRIPTOR_TYPE

    def pack(self) -> bytes:
        return _pack(
            "<9B",
            self.LENGTH,
            self.TYPE,
            self.number,
            self.alternate,
            self.num_endpoints,
            self.interface_class,
            self.interface_subclass,
            self.protocol,
            self.i_interface,
        )


@dataclass
class EndpointDescriptor:
    """Endpoint descriptor (7 bytes)."""

    address: int
    attributes: int
    packet_size: int
    interval: int

    LENGTH: ClassVar[int] = USB_ENDPOINT_DESC_SIZE
    TYPE: ClassVar[int] = USB_ENDPOINT_DESCRIPTOR_TYPE

    def pack(self) -> bytes:
        return _pack(
            "<BBBBHB",
            self.LENGTH,
            self.TYPE,
            self.address,
            self.attributes,
            self.packet_size,
            self.interval,
        )


@dataclass
class IADDescriptor:
    """Interface association descriptor binding interfaces into one function (8 bytes)."""

    first_interface: int
    interface_count: int
    function_class: int
    function_subclass: int
    function_protocol: int
    i_interface: int = 0

    LENGTH: ClassVar[int] = 8
    TYPE: ClassVar[int] = USB_IAD_DESCRIPTOR_TYPE

    def pack(self) -> bytes:
        return _pack(
            "<8B",
            self.LENGTH,
            self.TYPE,
            self.first_interface,
            self.interface_count,
            self.function_class,
            self.function_subclass,
            self.function_protocol,
            self.i_interface,
        )


@dataclass
class CDCCSInterfaceDescriptor:
    """CDC class-specific interface descriptor: 5 bytes, or 4 when ``d1`` is omitted."""

    subtype: int
    d0: int
    d1: int | None = None

    TYPE: ClassVar[int] = CDC_CS_INTERFACE

    @property
    def length(self) -> int:
        return 4 if self.d1 is None else 5

    def pack(self) -> bytes:
        if self.d1 is None:
            return _pack("<4B", 4, self.TYPE, self.subtype, self.d0)
        return _pack("<5B", 5, self.TYPE, self.subtype, self.d0, self.d1)