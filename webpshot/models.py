"""Core data types for screenshot capture and WebP encoding."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, replace
from datetime import datetime, timedelta
from os import PathLike
from pathlib import Path


@dataclass(frozen=True)
class Rectangle:
    """An axis-aligned rectangle in screen coordinates."""

    x: int
    y: int
    width: int
    height: int

    def contains_point(self, px: int, py: int) -> bool:
        """Return True if the point lies inside the rectangle."""
        return (
            self.x <= px < self.x + self.width
            and self.y <= py < self.y + self.height
        )

    def area(self) -> int:
        """Return the area in pixels."""
        return self.width * self.height


@dataclass(frozen=True)
class CaptureRegion:
    """A region of a display to capture."""

    x: int
    y: int
    width: int
    height: int

    @classmethod
    def from_rect(cls, rect: Rectangle) -> CaptureRegion:
        """Build a region covering the given rectangle."""
        return cls(rect.x, rect.y, rect.width, rect.height)


@dataclass
class DisplayInfo:
    """Information about a display or monitor."""

    index: int = 0
    name: str = "Primary Display"
    width: int = 1920
    height: int = 1080
    x: int = 0
    y: int = 0
    scale_factor: float = 1.0
    is_primary: bool = True
    refresh_rate: int = 60
    color_depth: int = 32

    def pixel_count(self) -> int:
        """Return the total number of pixels."""
        return self.width * self.height

    def bounds(self) -> Rectangle:
        """Return the display bounds as a rectangle."""
        return Rectangle(self.x, self.y, self.width, self.height)


class PixelFormat(enum.Enum):
    """Layout of raw pixel data."""

    RGBA8 = "RGBA8"
    BGRA8 = "BGRA8"
    RGB8 = "RGB8"
    BGR8 = "BGR8"
    Gray8 = "Gray8"
    GrayA8 = "GrayA8"

    def bytes_per_pixel(self) -> int:
        """Return the number of bytes one pixel occupies."""
        return _CHANNELS[self]

    def has_alpha(self) -> bool:
        """Return True if the format carries an alpha channel."""
        return self in (PixelFormat.RGBA8, PixelFormat.BGRA8, PixelFormat.GrayA8)

    def channel_count(self) -> int:
        """Return the number of channels."""
        return _CHANNELS[self]

    def __str__(self) -> str:
        return self.value


_CHANNELS = {
    PixelFormat.RGBA8: 4,
    PixelFormat.BGRA8: 4,
    PixelFormat.RGB8: 3,
    PixelFormat.BGR8: 3,
    PixelFormat.GrayA8: 2,
    PixelFormat.Gray8: 1,
}


@dataclass
class RawImage:
    """Uncompressed pixel data with its geometry.

    When no stride is given, rows are assumed to be tightly packed.
    """

    data: bytes
    width: int
    height: int
    format: PixelFormat
    stride: int | None = None

    def __post_init__(self) -> None:
        if self.stride is None:
            self.stride = self.width * self.format.bytes_per_pixel()

    def size(self) -> int:
        """Return the size of the pixel data in bytes."""
        return len(self.data)

    def pixel_count(self) -> int:
        """Return the number of pixels."""
        return self.width * self.height

    def is_valid(self) -> bool:
        """Return True if the buffer is large enough for the geometry."""
        return len(self.data) >= self.stride * self.height

    def get_pixel(self, x: int, y: int) -> bytes | None:
        """Return the bytes of the pixel at (x, y), or None if out of range."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            return None
        pixel_size = self.format.bytes_per_pixel()
        offset = y * self.stride + x * pixel_size
        end = offset + pixel_size
        if end > len(self.data):
            return None
        return bytes(self.data[offset:end])


@dataclass
class WebPConfig:
    """WebP encoder settings."""

    quality: int = 80
    method: int = 4
    lossless: bool = False
    near_lossless: int = 100
    segments: int = 4
    sns_strength: int = 50
    filter_strength: int = 60
    filter_sharpness: int = 0
    auto_filter: bool = False
    alpha_compression: bool = True
    alpha_filtering: int = 1
    alpha_quality: int = 100
    pass_count: int = 1
    thread_count: int = 0
    low_memory: bool = False
    exact: bool = False

    @classmethod
    def high_quality(cls) -> WebPConfig:
        """Preset favouring quality over speed."""
        return cls(quality=95, method=6, pass_count=10)

    @classmethod
    def fast(cls) -> WebPConfig:
        """Preset favouring speed."""
        return cls(quality=75, method=0, pass_count=1)

    @classmethod
    def lossless_preset(cls) -> WebPConfig:
        """Preset for lossless encoding."""
        return cls(lossless=True, quality=100, method=6)

    @classmethod
    def balanced(cls) -> WebPConfig:
        """Preset balancing quality and speed."""
        return cls(quality=85, method=4, pass_count=6)

    def validate(self) -> None:
        """Raise ValueError if any setting is out of range."""
        if not 0 <= self.quality <= 100:
            raise ValueError(f"Quality must be 0-100, got {self.quality}")
        if not 0 <= self.method <= 6:
            raise ValueError(f"Method must be 0-6, got {self.method}")
        if not 1 <= self.segments <= 4:
            raise ValueError(f"Segments must be 1-4, got {self.segments}")
        if not 0 <= self.filter_sharpness <= 7:
            raise ValueError(
                f"Filter sharpness must be 0-7, got {self.filter_sharpness}"
            )
        if not 0 <= self.alpha_filtering <= 2:
            raise ValueError(
                f"Alpha filtering must be 0-2, got {self.alpha_filtering}"
            )
        if not 1 <= self.pass_count <= 10:
            raise ValueError(f"Pass must be 1-10, got {self.pass_count}")

    def copy(self, **changes) -> WebPConfig:
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)


@dataclass
class CaptureConfig:
    """Settings for a capture."""

    webp_config: WebPConfig = field(default_factory=WebPConfig)
    include_cursor: bool = False
    region: CaptureRegion | None = None
    use_hardware_acceleration: bool = True
    max_retries: int = 3
    retry_delay: timedelta = timedelta(milliseconds=100)
    timeout: timedelta = timedelta(seconds=5)


@dataclass
class CaptureMetadata:
    """Timing and size information about one capture."""

    timestamp: datetime
    capture_duration: timedelta
    encoding_duration: timedelta
    original_size: int
    compressed_size: int
    implementation: str

    def compression_ratio(self) -> float:
        """Return compressed size divided by original size."""
        if self.original_size == 0:
            return 0.0
        return self.compressed_size / self.original_size

    def total_duration(self) -> timedelta:
        """Return capture time plus encoding time."""
        return self.capture_duration + self.encoding_duration

    def space_savings_percent(self) -> float:
        """Return the percentage of space saved by compression."""
        if self.original_size == 0:
            return 0.0
        return (1.0 - self.compression_ratio()) * 100.0


@dataclass
class Screenshot:
    """An encoded screenshot with its metadata."""

    data: bytes
    width: int
    height: int
    display_index: int
    metadata: CaptureMetadata

    def size(self) -> int:
        """Return the size of the encoded data in bytes."""
        return len(self.data)

    def save(self, path: str | PathLike[str]) -> None:
        """Write the encoded data to a file."""
        Path(path).write_bytes(self.data)


@dataclass
class PerformanceStats:
    """Aggregate statistics over many captures."""

    total_captures: int = 0
    successful_captures: int = 0
    failed_captures: int = 0
    total_bytes_captured: int = 0
    total_bytes_encoded: int = 0
    total_capture_time: timedelta = timedelta(0)
    total_encoding_time: timedelta = timedelta(0)
    fastest_capture: timedelta = timedelta(0)
    slowest_capture: timedelta = timedelta(0)

    def success_rate(self) -> float:
        """Return the percentage of captures that succeeded."""
        if self.total_captures == 0:
            return 0.0
        return self.successful_captures / self.total_captures * 100.0

    def average_capture_time(self) -> timedelta:
        """Return the mean duration of successful captures."""
        if self.successful_captures == 0:
            return timedelta(0)
        return self.total_capture_time / self.successful_captures

    def average_compression_ratio(self) -> float:
        """Return encoded bytes divided by captured bytes."""
        if self.total_bytes_captured == 0:
            return 0.0
        return self.total_bytes_encoded / self.total_bytes_captured