# imgpool

Small image-processing toolkit that runs a 3×3 Prewitt edge-detection
convolution or 2×2 max/min pooling over an image and writes the result
as a PNG.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Command line

```
imgpool <medium> <type> <path>
```

- `medium` – `HOST` or `DEVICE`
- `type` – `Prewitt_Edge_detection`, `Max_pooling` or `Min_pooling`
- `path` – the input image file

Example:

```
imgpool HOST Max_pooling ./wall-e.png
```

The result is written to the current directory as `<Medium><Operation>.png`,
for example `HostMaxP.png`, `DeviceMinP.png` or `HostConvCalc.png`.

Run with no arguments, `imgpool` behaves as `imgpool DEVICE Min_pooling ./wall-e.png`.
If the number of arguments is wrong, or the medium or type is not one of
those listed, a usage message is printed to standard error and the command
exits with status 2. An unreadable or missing image gives an error message
and status 1.

The convolution drops the one-pixel border, so its output is two pixels
narrower and two pixels shorter than the input (at least 3×3 pixels are
needed). Each channel's absolute response is combined into greyscale with
Rec. 709 weights and clamped to 0–255. Pooling halves both dimensions,
keeping the largest or smallest red, green and blue value of every 2×2
block; a trailing odd row or column is dropped. Output pixels are always
fully opaque.

A second command adds an array of 2²⁰ ones to an array of 2²⁰ twos and
prints the largest deviation of the sum from 3:

```
imgpool-vector-add
```

## Library use

```python
from imgpool.image import Image
from imgpool.operations import PREWITT_KERNEL, convolve, max_pool, min_pool

image = Image.load("input.png")          # any format Pillow reads, converted to RGBA
pooled = max_pool(image)
edges = convolve(image, PREWITT_KERNEL)
pooled.save("pooled.png")
print(pooled.width, pooled.height, pooled.pixel(0, 0))
```

`Image` wraps a `(height, width, 4)` uint8 numpy array (`Image.data`);
`Image.blank(width, height)` creates a zero-filled one. `imgpool.operations`
also provides `clamp(value)` and `greyscale(r, g, b)`.

`imgpool.pipeline.Convolution` wraps the same operations around one loaded
image. `Convolution.instance(path)` creates a shared instance on first use
(later calls return it; calling it first without a path raises
`RuntimeError`), and `Convolution.reset()` discards it. Its `conv_calc`,
`max_pool` and `min_pool` methods take an `Actor` (`Actor.HOST`,
`Actor.DEVICE`, or the strings `"HOST"` / `"DEVICE"`), write the result PNG
into the instance's output directory and return the resulting `Image`.

`imgpool.vector_add` provides `add(x, y)` and `max_error(values, expected)`.

## What it does not do

All work runs on the CPU with numpy. The `DEVICE` medium does not use a GPU
or any accelerator: it computes exactly the same result as `HOST` and only
changes the output file name prefix. There is no way to query graphics
devices or their properties.