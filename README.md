# scram

`scram` turns interleaved stereo audio samples into per-band frequency levels
and draws them as colourful spectrum visuals. It works on plain Python
sequences and `numpy` arrays. It gets its samples from whatever `Buffer` you
give it.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Processing audio

`scram.processor.Processor(sample_rate, sample_size, config=None)` takes windows
of interleaved stereo samples (`[l0, r0, l1, r1, ...]`). The sample size is
clamped to `Processor.MIN_SAMPLE_SIZE` (32) to `Processor.MAX_SAMPLE_SIZE`
(4096) and rounded up to a power of two. Each window is processed in these steps:

1. split into left and right channels and weighted by a window function
   (`scram.dsp.preprocess`);
2. transformed with a real FFT (`apply_rfft`) and reduced to bin magnitudes
   (`calculate_magnitudes`);
3. summed into bands on a linear, logarithmic, Bark or Mel scale
   (`scram.bands.aggregate_bands`);
4. smoothed across bands, scaled to 0..1, and given attack/decay peak smoothing
   (`scram.smoothing`).

Call `set_bands(n)` before processing. It sets the number of bands and resets
every bar to silence.

```python
import numpy as np

from scram.buffer import ChunkBuffer
from scram.config import Config
from scram.processor import Processor

rate, size = 48000, 4096
t = np.arange(size // 2) / rate
tone = np.sin(2 * np.pi * 440 * t)
samples = np.column_stack([tone, tone]).ravel()        # interleaved stereo
chunks = np.array_split(samples, 4)                    # arrives in pieces

processor = Processor(rate, size, Config())
processor.set_bands(64)

buffer = ChunkBuffer(chunks, size)
while not processor.update(buffer):
    pass                                               # window not full yet

left, right = processor.current_frequencies()
print([round(bar.value, 2) for bar in left])
```

`update` returns `False` while the buffer has no full window. It also returns
`False` once the chunks run out. `ChunkBuffer` keeps a sliding window of the
most recent `sample_size` samples. It raises `ValueError` for a chunk larger
than the window. To feed samples from somewhere else, subclass
`scram.buffer.Buffer` and implement `read_samples(sample_size)`. It should
return an array of samples, or `None`.

Each bar is a `scram.channel.Frequency` with `value`, `peak` and `ts`, the
monotonic time the peak was set.

### Configuration

`scram.config.Config` is a frozen dataclass made of:

- `banding`: a `Banding` with a `FrequencyCutoff` (default 20 Hz to 18 kHz) and
  a `FrequencyScale`: `LINEAR`, `LOGARITHMIC`, `BARK` or `MEL` (default)
- `window`: `Window.NONE`, `HANN`, `HAMMING` or `BLACKMAN` (default)
- `scaling`: `VolumeScale.LINEAR` or `LOGARITHMIC` (default, -60 dB to 0 dB)
- `band_smoothing`: `NoBandSmoothing`, `ExponentialSmoothing(factor=0.5)`
  (default) or `MovingAverageSmoothing(window_size)`
- `peak_smoothing`: `PeakSmoothing(attack_rate=20.0, decay_rate=0.5,
  decay_limit=1.0, peak_threshold=1e-4)`

`scram.bands` also has the scale conversions `hz_to_mel`, `mel_to_hz`,
`hz_to_bark` and `bark_to_hz`.

### Sharing results between threads

`scram.processor.Slot` holds the latest `(left, right)` pair of bar lists.
`put` stores a copy and replaces whatever was stored before. `take` does not
wait. It returns a copy of the stored pair, or `None` when the slot is empty
or another thread is writing to it at that moment.

## Drawing

A `scram.visual.Canvas` has `put(x, y, color)`, `width` and `height`.
`GridCanvas(width, height)` is an in-memory canvas that ignores positions
outside it. Use `painted()` to get the coloured cells and `clear()` to reset it.

Visuals in `scram.visualizers` implement `Visual.draw(left, right, dt, canvas)`:

- `SpecSlice`: a three-row strip coloured by each band's level
- `StackedFreqs`: left and right bars side by side in the bottom quarter
- `RadialBloom`: a ring of points whose radius follows the total energy
- `SpecCircular`: one point per band on a circle
- `SpecRibbon`: a line of band heights with short trails
- `ScrollingSpectro`: a spectrogram that scrolls upwards. Call
  `resize(size)` first.
- `StackedChannels(left_style, right_style)` and
  `StackedOutline(left_style, right_style)`: left bars grow up and right bars
  grow down from the centre line, drawn as gradients or as tips only

Colours are `scram.surface.Rgba` values, for example `Rgba.hex("#0FF")`. A
`Style(color, accent, ratio)` sets the gradients. The colour helpers
`lerp_color`, `darken_color`, `lighten_color`, `overlay_color`, `gradient` and
`spectro_color` are in `scram.blend`. `scram.surface.Surface` is a generic
fixed-size grid.

### Half-block text cells

`scram.half_block.HalfBlockRenderer(size, axis)` is a canvas that packs two
colour cells into one text cell with the half-block glyphs `▀ ▄` (vertical axis)
or `▌ ▐` (horizontal axis). The `size` is given in text cells, and
`dimensions()` gives the size in half cells. `cells(pos)` yields
`(Position, Pixel)` pairs and skips cells whose halves are both empty.
`draw(placer, pos)` passes them to `placer.put(position, pixel)`. A `Pixel` has
`char`, `fg` and `bg`, and `None` means the default colour.

`scram.visualizer.Visualizer` combines these. `resize(size)` takes the size in
text cells. `draw(left, right, dt, placer)` renders `SpecSlice`, `StackedFreqs`
and `RadialBloom` through a vertical half-block renderer into `placer`. It
draws nothing when either channel has no bands. `visualizer.axis.cross(size)`
gives the number of bands that fits the width.

## What this package does not do

- It does not record audio from a sound card or any other device. You supply
  the samples through a `Buffer`.
- It has no command and no terminal application. Opening a terminal, handling
  resize events and painting `Pixel`s on screen is up to the `placer` you pass
  to `Visualizer.draw` or `HalfBlockRenderer.draw`.