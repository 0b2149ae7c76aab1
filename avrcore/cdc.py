"""CDC ACM virtual serial port: descriptors, line coding and control requests."""

from __future__ import annotations

import dataclasses
import struct
from dataclasses import dataclass
from typing import ClassVar

from .usb_descriptors import (
    CDC_ABSTRACT_CONTROL_MANAGEMENT,
    CDC_ABSTRACT_CONTROL_MODEL,
    CDC_CALL_MANAGEMENT,
    CDC_COMMUNICATION_INTERFACE_CLASS,
    CDC_DATA_INTERFACE_CLASS,
    CDC_GET_LINE_CODING,
    CDC_HEADER,
    CDC_SEND_BREAK,
    CDC_SET_CONTROL_LINE_STATE,
    CDC_SET_LINE_CODING,
    CDC_UNION,
    REQUEST_DEVICETOHOST_CLASS_INTERFACE,
    REQUEST_HOSTTODEVICE_CLASS_INTERFACE,
    USB_ENDPOINT_TYPE_BULK,
    USB_ENDPOINT_TYPE_INTERRUPT,
    CDCCSInterfaceDescriptor,
    EndpointDescriptor,
    IADDescriptor,
    InterfaceDescriptor,
    SetupPacket,
    endpoint_in,
    endpoint_out,
)

CDC_ACM_INTERFACE = 0
CDC_DATA_INTERFACE = 1
CDC_ENDPOINT_ACM = 1
CDC_ENDPOINT_OUT = 2
CDC_ENDPOINT_IN = 3
USB_EP_SIZE = 64

RESET_BAUD = 1200


@dataclass
class LineInfo:
    """Line coding and control line state of the virtual port."""

    dte_rate: int = 57600
    char_format: int = 0
    parity_type: int = 0
    data_bits: int = 0
    line_state: int = 0

    _FORMAT: ClassVar[str] = "<IBBB"
    SIZE: ClassVar[int] = 7

    def pack(self) -> bytes:
        """The 7-byte line coding sent in answer to GET_LINE_CODING."""
        try:
            return struct.pack(
                self._FORMAT, self.dte_rate, self.char_format, self.parity_type, self.data_bits
            )
        except struct.error as exc:
            raise ValueError(f"line coding field out of range: {exc}") from exc

    @classmethod
    def unpack(cls, data: bytes) -> "LineInfo":
        """Decode a 7-byte line coding; the control line state starts cleared."""
        if len(data) < cls.SIZE:
            raise ValueError(f"line coding needs {cls.SIZE} bytes, got {len(data)}")
        return cls(*struct.unpack_from(cls._FORMAT, data))


class CdcSerial:
    """State of the CDC ACM function as driven by the host's class requests."""

    def __init__(self) -> None:
        self.line_info = LineInfo()
        self._break_value = -1
        self.bootloader_reset_pending = False

    def interface_descriptor(self) -> bytes:
        """The IAD, control and data interface descriptors of the function."""
        parts = [
            IADDescriptor(
                0, 2, CDC_COMMUNICATION_INTERFACE_CLASS, CDC_ABSTRACT_CONTROL_MODEL, 0
            ),
            InterfaceDescriptor(
                CDC_ACM_INTERFACE,
                1,
                CDC_COMMUNICATION_INTERFACE_CLASS,
                CDC_ABSTRACT_CONTROL_MODEL,
                0,
            ),
            CDCCSInterfaceDescriptor(CDC_HEADER, 0x10, 0x01),
            CDCCSInterfaceDescriptor(CDC_CALL_MANAGEMENT, 1, 1),
            CDCCSInterfaceDescriptor(CDC_ABSTRACT_CONTROL_MANAGEMENT, 6),
            CDCCSInterfaceDescriptor(CDC_UNION, CDC_ACM_INTERFACE, CDC_DATA_INTERFACE),
            EndpointDescriptor(
                endpoint_in(CDC_ENDPOINT_ACM), USB_ENDPOINT_TYPE_INTERRUPT, 0x10, 0x40
            ),
            InterfaceDescriptor(CDC_DATA_INTERFACE, 2, CDC_DATA_INTERFACE_CLASS, 0, 0),
            EndpointDescriptor(
                endpoint_out(CDC_ENDPOINT_OUT), USB_ENDPOINT_TYPE_BULK, USB_EP_SIZE, 0
            ),
            EndpointDescriptor(
                endpoint_in(CDC_ENDPOINT_IN), USB_ENDPOINT_TYPE_BULK, USB_EP_SIZE, 0
            ),
        ]
        return b"".join(part.pack() for part in parts)

    def handle_setup(self, setup: SetupPacket, payload: bytes | None = None) -> bytes | None:
        """Process a class request.

        Returns the data to send back (possibly empty) when the request is
        handled, or None when it is not a request this function accepts.
        """
        request = setup.b_request
        request_type = setup.bm_request_type

        if request_type == REQUEST_DEVICETOHOST_CLASS_INTERFACE:
            if request == CDC_GET_LINE_CODING:
                return self.line_info.pack()

        if request_type != REQUEST_HOSTTODEVICE_CLASS_INTERFACE:
            return None

        if request == CDC_SEND_BREAK:
            self._break_value = setup.w_value

        if request == CDC_SET_LINE_CODING:
            coding = LineInfo.unpack(payload or b"")
            self.line_info = dataclasses.replace(coding, line_state=self.line_info.line_state)

        if request == CDC_SET_CONTROL_LINE_STATE:
            self.line_info.line_state = setup.w_value_l
            self._update_reset_state()

        return b""

    def _update_reset_state(self) -> None:
        # Closing a port opened at 1200 baud arms the bootloader reset;
        # raising DTR again before it fires cancels it.
        if self.line_info.dte_rate == RESET_BAUD and not self.dtr():
            self.bootloader_reset_pending = True
        elif self.bootloader_reset_pending:
            self.bootloader_reset_pending = False

    def read_break(self) -> int:
        """Return the last break duration requested by the host (-1 if none) and clear it."""
        value, self._break_value = self._break_value, -1
        return value

    def baud(self) -> int:
        return self.line_info.dte_rate

    def dtr(self) -> bool:
        return bool(self.line_info.line_state & 0x1)

    def rts(self) -> bool:
        return bool(self.line_info.line_state & 0x2)

    def is_open(self) -> bool:
        """True once the host has opened the port (any control line set)."""
        return self.line_info.line_state > 0