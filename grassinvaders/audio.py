"""Audio types, sample data and a simple software mixer."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import List, Optional

PAN_NONE = -1000.0
MAX_CHANNELS = 8

_MIN_SPEED = 0.0001


class AudioEventType(enum.IntEnum):
    """Events emitted by audio streams and recorders."""

    STREAM_FRAGMENT = 513
    STREAM_FINISHED = 514
    RECORDER_FRAGMENT = 515


class AudioDepth(enum.IntEnum):
    """Sample depth and signedness."""

    INT8 = 0x00
    INT16 = 0x01
    INT24 = 0x02
    FLOAT32 = 0x03
    UINT8 = 0x08
    UINT16 = 0x09
    UINT24 = 0x0A


_UNSIGNED_BIT = 0x08


class ChannelConf(enum.IntEnum):
    """Speaker configuration; high nibble plus low nibble gives the channel count."""

    CONF_1 = 0x10
    CONF_2 = 0x20
    CONF_3 = 0x30
    CONF_4 = 0x40
    CONF_5_1 = 0x51
    CONF_6_1 = 0x61
    CONF_7_1 = 0x71


class PlayMode(enum.IntEnum):
    """How a sample is played."""

    ONCE = 0x100
    LOOP = 0x101
    BIDIR = 0x102
    LOOP_ONCE = 0x105


class MixerQuality(enum.IntEnum):
    """Interpolation used when mixing."""

    POINT = 0x110
    LINEAR = 0x111
    CUBIC = 0x112


def channel_count(conf: ChannelConf) -> int:
    """Total number of channels in a speaker configuration."""
    value = int(ChannelConf(conf))
    return (value >> 4) + (value & 0xF)


def is_unsigned(depth: AudioDepth) -> bool:
    """Whether samples of this depth are unsigned integers."""
    return bool(int(AudioDepth(depth)) & _UNSIGNED_BIT)


def depth_size(depth: AudioDepth) -> int:
    """Number of bytes taken by one sample value of this depth."""
    base = int(AudioDepth(depth)) & ~_UNSIGNED_BIT
    return {0: 1, 1: 2, 2: 3, 3: 4}[base]


def fill_silence(samples: int, depth: AudioDepth, conf: ChannelConf) -> bytes:
    """Return little-endian silence for ``samples`` frames."""
    if samples < 0:
        raise ValueError("sample count must not be negative")
    size = depth_size(depth)
    if is_unsigned(depth):
        unit = (1 << (size * 8 - 1)).to_bytes(size, "little")
    else:
        unit = bytes(size)
    return unit * (samples * channel_count(conf))


@dataclass
class Sample:
    """Raw interleaved audio data with its format."""

    data: bytes
    frequency: int
    depth: AudioDepth = AudioDepth.INT16
    channels: ChannelConf = ChannelConf.CONF_2

    def __post_init__(self) -> None:
        self.depth = AudioDepth(self.depth)
        self.channels = ChannelConf(self.channels)
        if self.frequency <= 0:
            raise ValueError("frequency must be positive")
        if len(self.data) % self.frame_size:
            raise ValueError("data length is not a whole number of frames")

    @property
    def frame_size(self) -> int:
        """Bytes in one frame of all channels."""
        return depth_size(self.depth) * channel_count(self.channels)

    @property
    def length(self) -> int:
        """Number of frames in the sample."""
        return len(self.data) // self.frame_size

    def duration(self) -> float:
        """Length of the sample in seconds."""
        return self.length / self.frequency


@dataclass(eq=False)
class SampleInstance:
    """A playable view of a sample with its own position and settings."""

    sample: Sample
    position: int = field(default=0, init=False)
    length: int = field(default=0, init=False)
    speed: float = field(default=1.0, init=False)
    gain: float = field(default=1.0, init=False)
    pan: float = field(default=0.0, init=False)
    playmode: PlayMode = field(default=PlayMode.ONCE, init=False)
    playing: bool = field(default=False, init=False)
    mixer: Optional["Mixer"] = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        self.length = self.sample.length

    @property
    def attached(self) -> bool:
        """Whether the instance is attached to a mixer."""
        return self.mixer is not None

    def _load(self, sample: Sample) -> None:
        self.playing = False
        self.sample = sample
        self.position = 0
        self.length = sample.length

    def play(self) -> None:
        """Start playing."""
        self.playing = True

    def stop(self) -> None:
        """Stop playing."""
        self.playing = False

    def set_position(self, value: int) -> None:
        """Move the play position to frame ``value``."""
        if not 0 <= value <= self.length:
            raise ValueError(f"position {value} outside 0..{self.length}")
        self.position = value

    def set_length(self, value: int) -> None:
        """Restrict playback to the first ``value`` frames of the sample."""
        if self.playing:
            raise RuntimeError("cannot change length while playing")
        if not 0 <= value <= self.sample.length:
            raise ValueError(f"length {value} outside 0..{self.sample.length}")
        self.length = value
        self.position = min(self.position, value)

    def set_speed(self, value: float) -> None:
        """Set the relative playback speed."""
        if abs(value) < _MIN_SPEED:
            raise ValueError("speed must not be zero")
        self.speed = float(value)

    def set_gain(self, value: float) -> None:
        """Set the playback gain."""
        self.gain = float(value)

    def set_pan(self, value: float) -> None:
        """Set the pan between -1 and 1, or PAN_NONE."""
        if value != PAN_NONE and not -1.0 <= value <= 1.0:
            raise ValueError(f"pan {value} outside -1..1")
        self.pan = float(value)

    def time(self) -> float:
        """Length of the playable part in seconds."""
        return self.length / self.sample.frequency


@dataclass(eq=False)
class Mixer:
    """Combines attached sample instances and hands out reserved voices."""

    frequency: int = 44100
    depth: AudioDepth = AudioDepth.FLOAT32
    channels: ChannelConf = ChannelConf.CONF_2
    quality: MixerQuality = MixerQuality.LINEAR
    gain: float = 1.0
    playing: bool = True
    instances: List[SampleInstance] = field(default_factory=list, init=False)
    _reserved: List[SampleInstance] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.frequency <= 0:
            raise ValueError("frequency must be positive")
        self.depth = AudioDepth(self.depth)
        self.channels = ChannelConf(self.channels)
        self.quality = MixerQuality(self.quality)

    def attach(self, instance: SampleInstance) -> None:
        """Attach an instance; it must not already be attached anywhere."""
        if instance.mixer is not None:
            raise ValueError("sample instance is already attached")
        instance.mixer = self
        self.instances.append(instance)

    def detach(self, instance: SampleInstance) -> None:
        """Detach an instance attached to this mixer and stop it."""
        if instance.mixer is not self:
            raise ValueError("sample instance is not attached to this mixer")
        self.instances.remove(instance)
        instance.mixer = None
        instance.playing = False
        if instance in self._reserved:
            self._reserved.remove(instance)

    def has_attachments(self) -> bool:
        """Whether anything is attached."""
        return bool(self.instances)

    @property
    def reserved(self) -> int:
        """Number of reserved voices available to ``play``."""
        return len(self._reserved)

    def reserve(self, count: int) -> None:
        """Keep exactly ``count`` reserved instances for ``play``."""
        if count < 0:
            raise ValueError("reserve count must not be negative")
        silence = Sample(b"", 1, AudioDepth.INT16, ChannelConf.CONF_1)
        while len(self._reserved) < count:
            instance = SampleInstance(silence)
            self.attach(instance)
            self._reserved.append(instance)
        while len(self._reserved) > count:
            self.detach(self._reserved[-1])

    def play(
        self,
        sample: Sample,
        gain: float = 1.0,
        pan: float = 0.0,
        speed: float = 1.0,
        mode: PlayMode = PlayMode.ONCE,
    ) -> SampleInstance:
        """Play a sample on a free reserved voice and return that voice."""
        free = next((inst for inst in self._reserved if not inst.playing), None)
        if free is None:
            raise RuntimeError("no free reserved sample voice")
        free._load(sample)
        free.set_gain(gain)
        free.set_pan(pan)
        free.set_speed(speed)
        free.playmode = PlayMode(mode)
        free.play()
        return free

    def stop_all(self) -> None:
        """Stop every attached instance."""
        for instance in self.instances:
            instance.stop()