"""Procedural sound generator for the table's sound effects.

Each effect is an oscillator whose frequency and gain follow ramps with
the same shape as browser audio automation: a linear ramp moves at a
constant rate, an exponential ramp keeps a constant ratio per second.
Samples are rendered as signed 16-bit mono PCM.
"""

import logging
import math
import os
import struct
import wave
from dataclasses import dataclass
from typing import Callable, Dict, List, Union

logger = logging.getLogger(__name__)

DEFAULT_SAMPLE_RATE = 44100
MAX_AMPLITUDE = 32767


def _sine(phase: float) -> float:
    return math.sin(2 * math.pi * phase)


def _square(phase: float) -> float:
    return 1.0 if phase < 0.5 else -1.0


def _triangle(phase: float) -> float:
    return 1.0 - 4.0 * abs(((phase + 0.25) % 1.0) - 0.5)


def _sawtooth(phase: float) -> float:
    return 2.0 * ((phase + 0.5) % 1.0) - 1.0


WAVEFORMS: Dict[str, Callable[[float], float]] = {
    "sine": _sine,
    "square": _square,
    "triangle": _triangle,
    "sawtooth": _sawtooth,
}


@dataclass(frozen=True)
class Ramp:
    """A parameter moving from one value to another over a time span.

    Holds ``start_value`` before ``start_time`` and ``end_value`` after
    ``end_time``.
    """

    start_value: float
    end_value: float
    start_time: float
    end_time: float
    exponential: bool = False

    def __post_init__(self) -> None:
        if self.end_time < self.start_time:
            raise ValueError("Ramp must end after it starts")
        if self.exponential and (self.start_value * self.end_value <= 0):
            raise ValueError("Exponential ramps need non-zero values of the same sign")

    def __call__(self, t: float) -> float:
        if t <= self.start_time:
            return self.start_value
        if t >= self.end_time:
            return self.end_value

        progress = (t - self.start_time) / (self.end_time - self.start_time)
        if self.exponential:
            return self.start_value * (self.end_value / self.start_value) ** progress
        return self.start_value + (self.end_value - self.start_value) * progress


Param = Union[float, Callable[[float], float]]


def _as_function(param: Param) -> Callable[[float], float]:
    if callable(param):
        return param
    return lambda _t: param


def render_voice(
    waveform: str,
    frequency: Param,
    gain: Param,
    duration: float,
    sample_rate: int = DEFAULT_SAMPLE_RATE,
) -> List[float]:
    """Render one oscillator through a gain stage.

    Args:
        waveform: One of sine, square, triangle, sawtooth
        frequency: Hz, constant or a function of time
        gain: Linear gain, constant or a function of time
        duration: Length in seconds
        sample_rate: Samples per second

    Returns:
        Float samples in roughly [-1, 1]
    """
    if waveform not in WAVEFORMS:
        raise ValueError(f"Unknown waveform: {waveform}")

    shape = WAVEFORMS[waveform]
    freq_at = _as_function(frequency)
    gain_at = _as_function(gain)

    samples = []
    phase = 0.0
    for i in range(int(duration * sample_rate)):
        t = i / sample_rate
        samples.append(shape(phase) * gain_at(t))
        # Accumulate phase so sweeps stay continuous
        phase = (phase + freq_at(t) / sample_rate) % 1.0
    return samples


def mix_into(track: List[float], voice: List[float], offset: float, sample_rate: int) -> None:
    """Add a voice into a track starting at ``offset`` seconds."""
    start = int(offset * sample_rate)
    for i, sample in enumerate(voice):
        if start + i >= len(track):
            break
        track[start + i] += sample


def to_int16(samples: List[float]) -> List[int]:
    """Scale float samples to clipped 16-bit integers."""
    return [max(-MAX_AMPLITUDE - 1, min(MAX_AMPLITUDE, int(s * MAX_AMPLITUDE))) for s in samples]


def generate_card_sound(sample_rate: int = DEFAULT_SAMPLE_RATE) -> List[int]:
    """Short "thwip" for a dealt card."""
    samples = render_voice(
        "triangle",
        frequency=Ramp(800, 300, 0.0, 0.1, exponential=True),
        gain=Ramp(0.3, 0.0, 0.0, 0.15),
        duration=0.15,
        sample_rate=sample_rate,
    )
    return to_int16(samples)


def generate_win_sound(sample_rate: int = DEFAULT_SAMPLE_RATE) -> List[int]:
    """Rising major arpeggio (C5 E5 G5 C6), notes overlapping."""
    notes = [523.25, 659.25, 783.99, 1046.50]
    note_gap = 0.1
    note_duration = 0.3

    track = [0.0] * int((note_gap * (len(notes) - 1) + note_duration) * sample_rate)
    for i, freq in enumerate(notes):
        voice = render_voice(
            "sine",
            frequency=freq,
            gain=Ramp(0.1, 0.001, 0.0, note_duration, exponential=True),
            duration=note_duration,
            sample_rate=sample_rate,
        )
        mix_into(track, voice, i * note_gap, sample_rate)
    return to_int16(track)


def generate_lose_sound(sample_rate: int = DEFAULT_SAMPLE_RATE) -> List[int]:
    """Falling sawtooth wobble."""
    samples = render_voice(
        "sawtooth",
        frequency=Ramp(200, 50, 0.0, 0.5),
        gain=Ramp(0.2, 0.0, 0.0, 0.5),
        duration=0.5,
        sample_rate=sample_rate,
    )
    return to_int16(samples)


def generate_chip_sound(sample_rate: int = DEFAULT_SAMPLE_RATE) -> List[int]:
    """Tiny square click for new games and pushes."""
    samples = render_voice(
        "square",
        frequency=800,
        gain=Ramp(0.05, 0.001, 0.0, 0.05, exponential=True),
        duration=0.05,
        sample_rate=sample_rate,
    )
    return to_int16(samples)


SOUND_GENERATORS: Dict[str, Callable[[int], List[int]]] = {
    "card": generate_card_sound,
    "win": generate_win_sound,
    "lose": generate_lose_sound,
    "chip": generate_chip_sound,
}


def to_pcm_bytes(samples: List[int], channels: int = 1) -> bytes:
    """Pack samples as little-endian 16-bit PCM, duplicated per channel."""
    if channels < 1:
        raise ValueError("Need at least one channel")
    frames = [s for s in samples for _ in range(channels)]
    return struct.pack(f"<{len(frames)}h", *frames)


def save_wav(samples: List[int], filepath: str, sample_rate: int = DEFAULT_SAMPLE_RATE) -> None:
    """Save samples as a mono WAV file."""
    directory = os.path.dirname(filepath)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with wave.open(filepath, "wb") as wav_file:
        wav_file.setnchannels(1)
        wav_file.setsampwidth(2)
        wav_file.setframerate(sample_rate)
        wav_file.writeframes(to_pcm_bytes(samples))


def generate_all_sounds(output_dir: str, sample_rate: int = DEFAULT_SAMPLE_RATE) -> List[str]:
    """Write every effect to ``output_dir`` as WAV files.

    Returns:
        Paths written
    """
    os.makedirs(output_dir, exist_ok=True)

    written = []
    for name, generator in SOUND_GENERATORS.items():
        path = os.path.join(output_dir, f"{name}.wav")
        save_wav(generator(sample_rate), path, sample_rate)
        logger.info("Wrote %s", path)
        written.append(path)
    return written


if __name__ == "__main__":
    # Export sounds when run directly
    logging.basicConfig(level=logging.INFO)
    base = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    generate_all_sounds(os.path.join(base, "assets", "sounds"))
