"""PNG loading into texture-ready pixel data, with colour keying and mipmaps."""

from __future__ import annotations

import io
import math
import os
import struct
from dataclasses import dataclass
from enum import IntEnum
from typing import BinaryIO, Callable, Optional, Union

from PIL import Image

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"

GL_TEXTURE_2D = 0x0DE1
GL_TEXTURE_CUBE_MAP = 0x8513
GL_TEXTURE_CUBE_MAP_POSITIVE_X = 0x8515
GL_TEXTURE_CUBE_MAP_NEGATIVE_Z = 0x851A

DISPLAY_GAMMA = 2.2
DEFAULT_FILE_GAMMA = 1.0 / 2.2
DEFAULT_MAX_TEXTURE_SIZE = 4096
OPAQUE = 255
_MAX_POWER = 24

COLOR_MASK_PALETTE = 1
COLOR_MASK_COLOR = 2
COLOR_MASK_ALPHA = 4
COLOR_GRAY = 0
COLOR_RGB = 2
COLOR_PALETTE = 3
COLOR_GRAY_ALPHA = 4
COLOR_RGB_ALPHA = 6

_NATURAL_MODES = {
    COLOR_GRAY: "L",
    COLOR_RGB: "RGB",
    COLOR_PALETTE: "P",
    COLOR_GRAY_ALPHA: "LA",
    COLOR_RGB_ALPHA: "RGBA",
}

Source = Union[str, "os.PathLike[str]", bytes, bytearray, BinaryIO]
AlphaCallback = Callable[[int, int, int], int]
Level = tuple[int, int, int, bytes]


class Transparency(IntEnum):
    """How the alpha channel of a loaded texture is produced."""

    CALLBACK = -3
    ALPHA = -2
    SOLID = -1
    STENCIL = 0
    BLEND1 = 1
    BLEND2 = 2
    BLEND3 = 3
    BLEND4 = 4
    BLEND5 = 5
    BLEND6 = 6
    BLEND7 = 7


class MipmapMode(IntEnum):
    """Special mipmap requests; any non-negative number is a single level."""

    NONE = 0
    BUILD = -1
    SIMPLE = -2


@dataclass
class RawImage:
    """Decoded PNG pixels, one byte per sample, with the file's palette if any."""

    width: int
    height: int
    depth: int
    components: int
    alpha: int
    data: bytes
    palette: Optional[list[tuple[int, int, int]]]


@dataclass
class Texture:
    """Pixel levels ready for upload, plus the size and depth of the source file."""

    width: int
    height: int
    depth: int
    components: int
    alpha: int
    levels: list[Level]

    @property
    def format(self) -> str:
        return "RGBA" if self.components == 4 else "RGB"

    @property
    def texture_width(self) -> int:
        return self.levels[0][1]

    @property
    def texture_height(self) -> int:
        return self.levels[0][2]


@dataclass
class _PngHeader:
    width: int
    height: int
    depth: int
    color: int
    gamma: Optional[float]
    palette: Optional[list[tuple[int, int, int]]]


def safe_size(size: int, max_size: int) -> int:
    """Return the smallest power of two holding ``size``, capped at ``max_size``."""
    if size > max_size:
        return max_size
    return next((1 << power for power in range(_MAX_POWER) if size <= 1 << power), max_size)


def resize_pixels(components: int, data: bytes, width: int, height: int,
                  new_width: int, new_height: int) -> bytes:
    """Nearest-neighbour resample of packed pixels to a new size."""
    if min(width, height, new_width, new_height, components) <= 0:
        raise ValueError("sizes and component count must be positive")
    if len(data) < width * height * components:
        raise ValueError("pixel data is shorter than the given size")
    sx = width / new_width
    sy = height / new_height
    out = bytearray()
    for y in range(new_height):
        row = int(y * sy) * width
        for x in range(new_width):
            start = (row + int(x * sx)) * components
            out += data[start:start + components]
    return bytes(out)


def half_size(components: int, width: int, height: int, data: bytes,
              filtered: bool) -> Optional[bytes]:
    """Halve an image in each dimension above one; None once it is 1x1.

    With ``filtered`` each output sample averages the source samples it covers,
    otherwise the top-left one is taken.
    """
    if width <= 1 and height <= 1:
        return None
    row = width * components
    offsets = [0]
    if width > 1:
        offsets.append(components)
    if height > 1:
        offsets.append(row)
    if width > 1 and height > 1:
        offsets.append(row + components)

    out_w = max(width // 2, 1)
    out_h = max(height // 2, 1)
    x_step = 2 if width > 1 else 0
    y_step = 2 if height > 1 else 0
    out = bytearray()
    for oy in range(out_h):
        row_start = oy * y_step * row
        for ox in range(out_w):
            base = row_start + ox * x_step * components
            for channel in range(base, base + components):
                if filtered:
                    out.append(sum(data[channel + o] for o in offsets) // len(offsets))
                else:
                    out.append(data[channel])
    return bytes(out)


def build_mipmaps(components: int, width: int, height: int, data: bytes,
                  filtered: bool) -> list[tuple[int, int, bytes]]:
    """Return (width, height, data) for every level from the full image down to 1x1."""
    current = bytes(data)
    levels = [(width, height, current)]
    while (smaller := half_size(components, width, height, current, filtered)) is not None:
        if width > 1:
            width //= 2
        if height > 1:
            height //= 2
        current = smaller
        levels.append((width, height, current))
    return levels


def bind_target(image_target: int) -> int:
    """Map a cube-map face target to the cube-map bind target; others pass through."""
    if GL_TEXTURE_CUBE_MAP_POSITIVE_X <= image_target <= GL_TEXTURE_CUBE_MAP_NEGATIVE_Z:
        return GL_TEXTURE_CUBE_MAP
    return image_target


def _read_source(source: Source) -> bytes:
    if isinstance(source, (bytes, bytearray)):
        return bytes(source)
    if isinstance(source, (str, os.PathLike)):
        with open(source, "rb") as handle:
            return handle.read()
    return source.read()


def _parse_header(raw: bytes) -> _PngHeader:
    if raw[:8] != PNG_SIGNATURE:
        raise ValueError("not a PNG file")
    offset = 8
    header: Optional[_PngHeader] = None
    gamma: Optional[float] = None
    palette: Optional[list[tuple[int, int, int]]] = None
    while offset + 8 <= len(raw):
        length, kind = struct.unpack_from(">I4s", raw, offset)
        body = raw[offset + 8:offset + 8 + length]
        offset += 12 + length
        if kind == b"IHDR":
            if len(body) < 13:
                raise ValueError("PNG header chunk is too short")
            width, height, depth, color = struct.unpack_from(">IIBB", body)
            header = _PngHeader(width, height, depth, color, None, None)
        elif kind == b"gAMA" and len(body) == 4:
            value = struct.unpack(">I", body)[0]
            gamma = value / 100000 if value else None
        elif kind == b"PLTE":
            palette = list(zip(body[0::3], body[1::3], body[2::3]))
        elif kind == b"IEND":
            break
    if header is None:
        raise ValueError("PNG file has no header chunk")
    if header.color not in _NATURAL_MODES:
        raise ValueError(f"unknown PNG colour type {header.color}")
    header.gamma = gamma
    header.palette = palette
    return header


def _decode(raw: bytes, color: int) -> Image.Image:
    try:
        image = Image.open(io.BytesIO(raw))
        image.load()
    except (OSError, SyntaxError, ValueError) as exc:
        raise ValueError(f"corrupt PNG data: {exc}") from exc
    if image.mode.startswith("I"):
        samples = bytes(min(v >> 8, 255) for v in image.getdata())
        image = Image.frombytes("L", image.size, samples)
    mode = _NATURAL_MODES[color]
    if image.mode != mode:
        image = image.convert(mode)
    return image


def _apply_table(image: Image.Image, table: bytes) -> Image.Image:
    identity = list(range(256))
    lut: list[int] = []
    for band in image.getbands():
        lut.extend(identity if band == "A" else table)
    return image.point(lut)


class PngLoader:
    """Loads PNG files with gamma correction, colour keying and mipmap building."""

    def __init__(self, max_texture_size: int = DEFAULT_MAX_TEXTURE_SIZE) -> None:
        if max_texture_size <= 0:
            raise ValueError("max_texture_size must be positive")
        self.max_texture_size = max_texture_size
        self.stencil = (0, 0, 0)
        self.standard_orientation = False
        self.screen_gamma = DISPLAY_GAMMA
        self._gamma_explicit = False
        self._alpha_callback: Optional[AlphaCallback] = None

    def set_stencil(self, red: int, green: int, blue: int) -> None:
        """Set the colour that becomes fully transparent in stencil mode."""
        self.stencil = (red & 0xFF, green & 0xFF, blue & 0xFF)

    def set_alpha_callback(self, callback: Optional[AlphaCallback]) -> None:
        """Set the per-pixel alpha function; None restores the opaque default."""
        self._alpha_callback = callback

    def set_viewing_gamma(self, viewing_gamma: float) -> None:
        """Fix the viewing gamma; zero or less falls back to the environment."""
        if viewing_gamma > 0:
            self._gamma_explicit = True
            self.screen_gamma = DISPLAY_GAMMA / viewing_gamma
        else:
            self._gamma_explicit = False
            self.screen_gamma = DISPLAY_GAMMA

    def _check_gamma_env(self) -> None:
        value = os.environ.get("VIEWING_GAMMA")
        if value is None or self._gamma_explicit:
            return
        try:
            viewing = float(value.split()[0])
        except (ValueError, IndexError):
            return
        if viewing > 0:
            self.screen_gamma = DISPLAY_GAMMA / viewing

    def _gamma_table(self, file_gamma: Optional[float]) -> Optional[bytes]:
        self._check_gamma_env()
        exponent = 1.0 / ((file_gamma or DEFAULT_FILE_GAMMA) * self.screen_gamma)
        if math.isclose(exponent, 1.0, rel_tol=1e-6):
            return None
        return bytes(round(255 * (v / 255) ** exponent) for v in range(256))

    def _orient(self, data: bytes, row_len: int) -> bytes:
        if not self.standard_orientation or row_len == 0:
            return data
        rows = [data[start:start + row_len] for start in range(0, len(data), row_len)]
        return b"".join(reversed(rows))

    def _callback_alpha(self, r: int, g: int, b: int) -> int:
        if self._alpha_callback is None:
            return OPAQUE
        return int(self._alpha_callback(r, g, b)) & 0xFF

    def _alpha_function(self, trans: Transparency) -> Callable[[int, int, int], int]:
        stencil = self.stencil
        functions: dict[Transparency, Callable[[int, int, int], int]] = {
            Transparency.CALLBACK: self._callback_alpha,
            Transparency.STENCIL: lambda r, g, b: 0 if (r, g, b) == stencil else 255,
            Transparency.BLEND1: lambda r, g, b: min(r + g + b, 255),
            Transparency.BLEND2: lambda r, g, b: 255 if r + g + b > 510 else (r + g + b) // 2,
            Transparency.BLEND3: lambda r, g, b: (r + g + b) // 3,
            Transparency.BLEND4: lambda r, g, b: min(r * r + g * g + b * b, 255),
            Transparency.BLEND5: lambda r, g, b: _capped(r * r + g * g + b * b, 2),
            Transparency.BLEND6: lambda r, g, b: _capped(r * r + g * g + b * b, 3),
            Transparency.BLEND7: lambda r, g, b: (
                255 if r * r + g * g + b * b > 255 * 255 else int(math.sqrt(r * r + g * g + b * b))
            ),
        }
        try:
            return functions[trans]
        except KeyError:
            raise ValueError(f"{trans.name} does not derive alpha from colour") from None

    def apply_alpha(self, rgb: bytes, trans: Transparency) -> bytes:
        """Turn packed RGB pixels into RGBA using a colour-keyed transparency mode."""
        alpha_of = self._alpha_function(Transparency(trans))
        if len(rgb) % 3:
            raise ValueError("RGB data length is not a multiple of three")
        out = bytearray()
        for r, g, b in zip(rgb[0::3], rgb[1::3], rgb[2::3]):
            out += bytes((r, g, b, alpha_of(r, g, b)))
        return bytes(out)

    def load_raw(self, source: Source) -> RawImage:
        """Decode a PNG without converting its colour layout."""
        raw = _read_source(source)
        header = _parse_header(raw)
        image = _decode(raw, header.color)
        table = self._gamma_table(header.gamma)

        palette = None
        if header.color == COLOR_PALETTE:
            palette = header.palette or []
            if table is not None:
                palette = [(table[r], table[g], table[b]) for r, g, b in palette]
        elif table is not None:
            image = _apply_table(image, table)

        if header.color & COLOR_MASK_ALPHA:
            components = 2 if header.color == COLOR_GRAY_ALPHA else 4
            alpha = 8
        else:
            components = 1 if header.color in (COLOR_PALETTE, COLOR_GRAY) else 3
            alpha = 0

        data = self._orient(image.tobytes(), header.width * components)
        return RawImage(header.width, header.height, header.depth, components, alpha, data, palette)

    def load(self, source: Source, mipmap: int = MipmapMode.NONE,
             trans: Transparency = Transparency.SOLID) -> Texture:
        """Decode a PNG into RGB or RGBA levels sized to powers of two."""
        trans = Transparency(trans)
        if mipmap < 0 and mipmap not in (MipmapMode.BUILD, MipmapMode.SIMPLE):
            raise ValueError(f"invalid mipmap request {mipmap}")
        raw = _read_source(source)
        header = _parse_header(raw)

        keep_alpha = bool(header.color & COLOR_MASK_ALPHA) and trans == Transparency.ALPHA
        channels = 4 if keep_alpha else 3
        image = _decode(raw, header.color).convert("RGBA" if keep_alpha else "RGB")
        table = self._gamma_table(header.gamma)
        if table is not None:
            image = _apply_table(image, table)
        data = self._orient(image.tobytes(), header.width * channels)

        width, height = header.width, header.height
        tex_w = safe_size(width, self.max_texture_size)
        tex_h = safe_size(height, self.max_texture_size)
        if (tex_w, tex_h) != (width, height):
            data = resize_pixels(channels, data, width, height, tex_w, tex_h)

        if trans in (Transparency.SOLID, Transparency.ALPHA):
            components, pixels = channels, data
        else:
            components, pixels = 4, self.apply_alpha(data, trans)

        if mipmap in (MipmapMode.BUILD, MipmapMode.SIMPLE):
            filtered = mipmap == MipmapMode.BUILD
            levels = [
                (index, w, h, level)
                for index, (w, h, level) in enumerate(
                    build_mipmaps(components, tex_w, tex_h, pixels, filtered)
                )
            ]
        else:
            levels = [(int(mipmap), tex_w, tex_h, pixels)]

        return Texture(
            width=width,
            height=height,
            depth=header.depth,
            components=components,
            alpha=8 if components == 4 else 0,
            levels=levels,
        )


def _capped(value: int, divisor: int) -> int:
    return 255 if value > 255 * divisor else value // divisor