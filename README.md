# webpshot

The data model for capturing screenshots and encoding them as WebP. It
covers:

- display descriptions
- pixel formats and raw pixel buffers
- WebP encoder settings, with presets and validation
- capture configuration and capture regions
- screenshot results and their metadata
- performance statistics

Everything lives in `webpshot.models`. The package needs only the standard
library.

## Installation

```
pip install webpshot
```

## Usage

### Displays and rectangles

```python
from webpshot.models import DisplayInfo, Rectangle

display = DisplayInfo()            # 1920x1080 primary display, 60 Hz
display.pixel_count()              # 2073600
bounds = display.bounds()          # Rectangle(x=0, y=0, width=1920, height=1080)
bounds.contains_point(100, 100)    # True
Rectangle(0, 0, 10, 20).area()     # 200
```

`Rectangle` and `CaptureRegion` are frozen, so they can be compared and
hashed.

### Pixel formats and raw images

```python
from webpshot.models import PixelFormat, RawImage

PixelFormat.RGBA8.bytes_per_pixel()   # 4
PixelFormat.RGB8.has_alpha()          # False
PixelFormat.GrayA8.channel_count()    # 2
str(PixelFormat.BGRA8)                # 'BGRA8'

image = RawImage(bytes([255]) * (4 * 4 * 4), 4, 4, PixelFormat.RGBA8)
image.is_valid()          # True
image.size()              # 64
image.get_pixel(0, 0)     # b'\xff\xff\xff\xff'
image.get_pixel(4, 0)     # None: outside the image
```

If you do not give a stride, it is set to the width times the format's
bytes per pixel. Pass `stride=` when rows carry padding. `is_valid()`
checks that the buffer holds at least `stride * height` bytes.
`get_pixel()` returns `None` for coordinates outside the image, and also
when the buffer is too short to hold the pixel.

### WebP encoder settings

```python
from webpshot.models import WebPConfig

config = WebPConfig()                 # quality 80, method 4
WebPConfig.high_quality()             # quality 95, method 6, pass_count 10
WebPConfig.fast()                     # quality 75, method 0
WebPConfig.lossless_preset()          # lossless, quality 100, method 6
WebPConfig.balanced()                 # quality 85, method 4, pass_count 6

tweaked = config.copy(quality=90)     # a new config; the original is unchanged

WebPConfig(quality=101).validate()    # raises ValueError
```

`validate()` raises `ValueError` in any of these cases:

- quality is outside 0–100
- method is outside 0–6
- segments is outside 1–4
- filter sharpness is outside 0–7
- alpha filtering is outside 0–2
- `pass_count` is outside 1–10

### Capture configuration and results

```python
from webpshot.models import CaptureConfig, CaptureRegion, Rectangle

capture = CaptureConfig(region=CaptureRegion.from_rect(Rectangle(0, 0, 800, 600)))
capture.max_retries                   # 3
capture.retry_delay                   # timedelta(milliseconds=100)
capture.timeout                       # timedelta(seconds=5)
```

A `Screenshot` holds the encoded bytes, the image size, the display index
and a `CaptureMetadata`. `Screenshot.size()` returns the number of encoded
bytes. `Screenshot.save(path)` writes those bytes to a file.

The metadata provides these methods:

- `compression_ratio()`: the compressed size divided by the original size.
- `space_savings_percent()`: the percentage of space saved.
- `total_duration()`: the capture time plus the encoding time.

When the original size is zero, the ratio and the savings are both `0.0`.

A `PerformanceStats` keeps running totals over many captures and provides
these methods:

- `success_rate()`: the percentage of captures that succeeded.
- `average_capture_time()`: the mean duration of the successful captures.
- `average_compression_ratio()`: the encoded bytes divided by the captured bytes.

Each method returns zero when there is nothing to divide by.

## What this package does not do

The package only describes captures and encodings. It has no screen
capture of its own, no display enumeration, no WebP encoder and no
command-line tool. Code that captures a screen and encodes the result uses
these types, but you have to provide that code yourself.

## Running the tests

```
pip install -e ".[test]"
pytest
```