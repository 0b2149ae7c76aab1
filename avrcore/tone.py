"""Square-wave tone generation on timer-driven pins."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import NamedTuple

DEFAULT_F_CPU = 16_000_000
DEFAULT_TONE_TIMERS = (3,)

_TIMERS = range(6)
_EIGHT_BIT_TIMERS = frozenset({0, 2})
_MASK32 = 0xFFFFFFFF
_MAX_FREQUENCY = 0xFFFF


class TimerSettings(NamedTuple):
    """Compare value and clock-select bits for a timer running in CTC mode."""

    ocr: int
    prescaler_bits: int


def _check_frequency(frequency: int) -> None:
    if not 1 <= frequency <= _MAX_FREQUENCY:
        raise ValueError(f"frequency must be between 1 and {_MAX_FREQUENCY} Hz, not {frequency}")


def timer_settings(timer: int, frequency: int, f_cpu: int = DEFAULT_F_CPU) -> TimerSettings:
    """Pick the prescaler and compare value that best produce ``frequency``.

    Timers 0 and 2 are 8-bit and scan their prescalers for the first fit;
    the others are 16-bit and choose between clk/1 and clk/64.
    """
    if timer not in _TIMERS:
        raise ValueError(f"no timer {timer}")
    _check_frequency(frequency)
    half = f_cpu // frequency // 2

    def ocr_for(prescale: int) -> int:
        return (half // prescale - 1) & _MASK32

    if timer in _EIGHT_BIT_TIMERS:
        timer0 = timer == 0
        ocr, bits = ocr_for(1), 0b001
        if ocr > 255:
            ocr, bits = ocr_for(8), 0b010
            if not timer0 and ocr > 255:
                ocr, bits = ocr_for(32), 0b011
            if ocr > 255:
                ocr, bits = ocr_for(64), (0b011 if timer0 else 0b100)
                if not timer0 and ocr > 255:
                    ocr, bits = ocr_for(128), 0b101
                if ocr > 255:
                    ocr, bits = ocr_for(256), (0b100 if timer0 else 0b110)
                    if ocr > 255:
                        ocr, bits = ocr_for(1024), (0b101 if timer0 else 0b111)
        return TimerSettings(ocr, bits)

    ocr, bits = ocr_for(1), 0b001
    if ocr > 0xFFFF:
        ocr, bits = ocr_for(64), 0b011
    return TimerSettings(ocr, bits)


def toggle_count(frequency: int, duration: int) -> int:
    """Pin toggles needed for ``duration`` milliseconds; -1 plays until stopped."""
    if duration <= 0:
        return -1
    # The doubled frequency is a 16-bit quantity before it meets the duration.
    doubled = (2 * frequency) & 0xFFFF
    return ((doubled * duration) & _MASK32) // 1000


@dataclass
class _TimerState:
    pin: int | None = None
    toggles: int = 0
    settings: TimerSettings | None = None
    active: bool = False


class ToneGenerator:
    """Assigns pins to tone timers and models their compare-match interrupts.

    ``tick`` stands for one compare-match interrupt of a timer; pin levels
    are kept per pin and read with ``pin_level``.
    """

    def __init__(self, timers: Iterable[int] = DEFAULT_TONE_TIMERS, f_cpu: int = DEFAULT_F_CPU) -> None:
        slots = tuple(timers)
        if not slots:
            raise ValueError("at least one tone timer is needed")
        for timer in slots:
            if timer not in _TIMERS:
                raise ValueError(f"no timer {timer}")
        if len(set(slots)) != len(slots):
            raise ValueError("a timer can serve only one tone slot")
        if f_cpu <= 0:
            raise ValueError("clock frequency must be positive")
        self.f_cpu = f_cpu
        self._slot_timers = slots
        self._slot_pins: list[int | None] = [None] * len(slots)
        self._timers = {timer: _TimerState() for timer in slots}
        self._levels: dict[int, int] = {}

    def _begin(self, pin: int) -> int | None:
        for timer, used_pin in zip(self._slot_timers, self._slot_pins):
            if used_pin == pin:
                return timer
        for index, used_pin in enumerate(self._slot_pins):
            if used_pin is None:
                self._slot_pins[index] = pin
                timer = self._slot_timers[index]
                self._timers[timer] = _TimerState(pin=pin)
                return timer
        return None

    def tone(self, pin: int, frequency: int, duration: int = 0) -> int | None:
        """Start a tone on ``pin``; return the timer used, or None if all are busy.

        A ``duration`` of 0 plays until ``no_tone`` is called.
        """
        _check_frequency(frequency)
        timer = self._begin(pin)
        if timer is None:
            return None
        self._levels.setdefault(pin, 0)
        state = self._timers[timer]
        state.settings = timer_settings(timer, frequency, self.f_cpu)
        state.toggles = toggle_count(frequency, duration)
        state.active = True
        return timer

    def no_tone(self, pin: int) -> None:
        """Stop the tone on ``pin``, release its timer and drive the pin low."""
        for index, used_pin in enumerate(self._slot_pins):
            if used_pin == pin:
                self._slot_pins[index] = None
                self._timers[self._slot_timers[index]].active = False
                break
        self._levels[pin] = 0

    def tick(self, timer: int) -> bool:
        """Run one compare-match interrupt; False if the timer is not running."""
        state = self._timers.get(timer)
        if state is None:
            raise ValueError(f"timer {timer} is not a tone timer")
        if not state.active:
            return False
        if state.toggles != 0:
            self._levels[state.pin] = self._levels.get(state.pin, 0) ^ 1
            if state.toggles > 0:
                state.toggles -= 1
        elif timer == 2:
            # Timer 2 releases its slot so it can be set up again next time.
            first_pin = self._slot_pins[0]
            if first_pin is not None:
                self.no_tone(first_pin)
        else:
            state.active = False
            self._levels[state.pin] = 0
        return True

    def pin_level(self, pin: int) -> int:
        """Current output level of ``pin``: 0 or 1."""
        return self._levels.get(pin, 0)