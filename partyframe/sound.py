"""WAVE clip loading and a fixed number of playable sound slots."""

from __future__ import annotations

import io
import struct
from dataclasses import dataclass
from typing import Optional, Union

import pygame

SOUND_NOSOUND = -1

_FMT = struct.Struct("<HHIIHH")


class WaveError(ValueError):
    """Raised when a file is not a readable RIFF WAVE clip."""


@dataclass
class WaveClip:
    """The format block and sample data of a WAVE file."""

    format_tag: int
    channels: int
    sample_rate: int
    avg_bytes_per_sec: int
    block_align: int
    bits_per_sample: int
    data: bytes


def _fourcc(value: Union[str, bytes]) -> bytes:
    code = value.encode("ascii") if isinstance(value, str) else bytes(value)
    if len(code) != 4:
        raise ValueError(f"a chunk id has four characters, got {value!r}")
    return code


def find_chunk(data: bytes, fourcc: Union[str, bytes]) -> tuple[int, int]:
    """Return (size, offset) of the data of the first chunk with id ``fourcc``.

    The search starts at the top of the file and descends into the RIFF chunk,
    whose data is taken to be just its four-byte form type.
    """
    target = _fourcc(fourcc)
    offset = 0
    seen_riff = False
    while offset + 8 <= len(data):
        chunk_type = data[offset:offset + 4]
        (size,) = struct.unpack_from("<I", data, offset + 4)
        offset += 8
        if chunk_type == b"RIFF":
            seen_riff = True
            size = 4
        if chunk_type == target:
            return size, offset
        if not seen_riff:
            break
        offset += size
    raise WaveError(f"chunk {target.decode('ascii', 'replace')!r} not found")


def _chunk_bytes(data: bytes, fourcc: str) -> bytes:
    size, offset = find_chunk(data, fourcc)
    if offset + size > len(data):
        raise WaveError(f"chunk {fourcc!r} is truncated")
    return data[offset:offset + size]


def parse_wave(data: bytes) -> WaveClip:
    """Parse a RIFF WAVE file held in memory."""
    if _chunk_bytes(data, "RIFF") != b"WAVE":
        raise WaveError("not a WAVE file")
    fmt = _chunk_bytes(data, "fmt ")
    if len(fmt) < _FMT.size:
        raise WaveError("format chunk is too short")
    fields = _FMT.unpack_from(fmt)
    return WaveClip(*fields, data=_chunk_bytes(data, "data"))


def load_wave(path: str) -> WaveClip:
    """Read and parse a WAVE file from disk."""
    try:
        with open(path, "rb") as handle:
            raw = handle.read()
    except OSError as exc:
        raise WaveError(f"cannot open {path!r}") from exc
    return parse_wave(raw)


@dataclass
class _Slot:
    filename: str
    clip: WaveClip
    raw: bytes
    sound: Optional[pygame.mixer.Sound] = None
    channel: Optional[pygame.mixer.Channel] = None


class SoundManager:
    """Holds up to ``max_sounds`` loaded clips, addressed by slot number."""

    def __init__(self, max_sounds: int) -> None:
        if max_sounds < 0:
            raise ValueError("max_sounds must not be negative")
        self._slots: list[Optional[_Slot]] = [None] * max_sounds
        self._owns_mixer = False
        if not pygame.mixer.get_init():
            try:
                pygame.mixer.init()
                self._owns_mixer = True
            except pygame.error:
                pass

    def _slot(self, sound_id: int) -> Optional[_Slot]:
        if not 0 <= sound_id < len(self._slots):
            raise ValueError(f"no sound slot {sound_id}")
        return self._slots[sound_id]

    def load(self, filename: str) -> int:
        """Load a clip into the first free slot and return the slot number."""
        try:
            index = self._slots.index(None)
        except ValueError:
            raise RuntimeError("no free sound slot") from None
        try:
            with open(filename, "rb") as handle:
                raw = handle.read()
        except OSError as exc:
            raise WaveError(f"cannot open {filename!r}") from exc
        clip = parse_wave(raw)
        self._slots[index] = _Slot(filename, clip, raw)
        return index

    def unload(self, sound_id: int) -> None:
        """Free a slot; the empty id is ignored."""
        if sound_id == SOUND_NOSOUND:
            return
        if self._slot(sound_id) is not None:
            self._slots[sound_id] = None

    def play(self, sound_id: int) -> None:
        """Start a clip from the beginning; does nothing without audio output."""
        if sound_id == SOUND_NOSOUND:
            return
        slot = self._slot(sound_id)
        if slot is None or not pygame.mixer.get_init():
            return
        try:
            if slot.sound is None:
                slot.sound = pygame.mixer.Sound(file=io.BytesIO(slot.raw))
            slot.channel = slot.sound.play()
        except pygame.error:
            slot.channel = None

    def stop(self, sound_id: int) -> None:
        """Stop the clip's most recent playback, if any."""
        if sound_id == SOUND_NOSOUND:
            return
        slot = self._slot(sound_id)
        if slot is not None and slot.channel is not None:
            slot.channel.stop()
            slot.channel = None

    def shutdown(self) -> None:
        """Stop and unload every clip and release the mixer if it was started here."""
        for index, slot in enumerate(self._slots):
            if slot is not None:
                self.stop(index)
                self.unload(index)
        self._slots = []
        if self._owns_mixer and pygame.mixer.get_init():
            pygame.mixer.quit()
        self._owns_mixer = False