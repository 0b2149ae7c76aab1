"""Host-side models of a microcontroller core: strings, characters, math, USB descriptors, CDC and tone timing."""

__version__ = "0.1.0"

__all__ = [
    "cdc",
    "tone",
    "usb_descriptors",
    "wcharacter",
    "wmath",
    "wstring",
    "wstring_ops",
]