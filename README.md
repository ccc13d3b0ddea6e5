# cylinview

`cylinview` builds the pictures shown on a spinning cylindrical display. The
display is a ring of sixteen 32×128 monochrome panels with blank 39-pixel gaps
between them. The package also holds the byte-level logic the display's
controller uses to talk to its parts.

## Modules

- `cylinview.screen`: the panel geometry constants (`CV_WIDTH`, `CV_HEIGHT`,
  `CV_MARGIN`, `CV_DISPLAYS`, `CV_V_WIDTH`, `CV_FRAME_BYTES`, ...), `Color`
  (`BLACK`, `WHITE`), the abstract `ScreenBase` and `MonoScreen`. A
  `MonoScreen` is one panel backed by a 512-byte frame buffer with eight
  packed dots per byte. Dots outside the panel raise `IndexError`.
- `cylinview.cyclic_screen`: `CyclicMonoScreen` joins all sixteen panels into
  one virtual strip `CV_V_WIDTH` dots wide that wraps around. Dots that land
  in a gap, or above or below the screen, are dropped on write and read back
  as black. `attach_buffer(buffer)` makes the panels draw into consecutive
  slices of one `CV_FRAME_BYTES`-byte buffer; `mono_screen(index)` returns a
  single panel.
- `cylinview.drawer`: `CyclicMonoDrawer` draws dots, horizontal and vertical
  lines, straight lines, rectangles (outline or filled), triangles (outline
  or filled), circles (outline or filled) and `MonoImage`s. `draw_image`
  can centre the image, shift it by its own draw offset, and skip its
  transparent dots when `blend` is set.
- `cylinview.image`: `MonoImage`, a frozen dataclass holding a packed 1-bit
  image, an optional packed alpha mask and a draw offset.
- `cylinview.snow`: `Snow` and `Grain`, a falling-snow particle effect driven
  by any callable that returns 32-bit random numbers. Call `step()` once per
  frame.
- `cylinview.rand`: `PseudoRand`, a 32-bit xorshift128 generator. It is also
  an endless iterator of its numbers.
- `cylinview.timer`: `IntervalTimer`, which reports once every `interval_ms`
  milliseconds. It reads a monotonic clock by default or any millisecond
  clock you pass in.
- `cylinview.app`: `App` and `angle_to_xpos`. `App` turns the rotor angle
  into a horizontal offset and renders the current mode into a frame buffer.
  When automatic mode change is on, `loop()` steps the mode from 0 to 5 and
  back on each timer tick; `init()` switches it off.
- `cylinview.serialcmd`: `SerialCmd` collects characters (fed directly with
  `feed`, or read one at a time from a serial-like object with `loop`) into
  lines and splits each line into a command word and up to 16 parameters.
  The module also has the parsing helpers `string_to_int`, `string_to_char`,
  `string_to_float`, `string_to_uint64` and `string_hex_to_uint`.
- `cylinview.bridge`: `crc16`, `build_command`, the `Command` codes and
  `SpiI2cBridge`. `SpiI2cBridge` sends commands, polls for responses and
  splits frame data over two channels through a transport you supply.
- `cylinview.circular_buffer`: `CircularBuffer` divides one byte buffer into
  one or two slots and hands them out in turn to a writer and a reader.
- `cylinview.motor`: `Motor` maps a signed power, a brake and a decay mode
  onto the two PWM inputs of an H-bridge driver.
- `cylinview.encoder`: `PwmEncoder` turns PWM pulse widths into an angle.
  `SpiEncoder` reads and writes the encoder's 14-bit registers with parity
  through a transfer callable. `calc_parity` and `build_command` produce the
  command words.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from cylinview.cyclic_screen import CyclicMonoScreen
from cylinview.drawer import CyclicMonoDrawer
from cylinview.screen import Color

screen = CyclicMonoScreen()
drawer = CyclicMonoDrawer(screen)

drawer.clear_frame(Color.BLACK)
drawer.draw_circle(16, 64, 20, Color.WHITE)
drawer.draw_hline(0, 100, 64, Color.WHITE)

print(drawer.get_dot(16, 64))
```

Checksumming a bridge command:

```python
from cylinview.bridge import Command, build_command, crc16

packet = build_command(Command.PING)   # 9 bytes: sync, command, options, CRC
print(packet.hex(), hex(crc16(packet[:7])))
```

## What it does not do

- It has no command-line program and does not drive real hardware. The
  bridge, encoder and motor classes only build and interpret bytes and PWM
  values; you give them callables or transport objects that do the actual
  transfers or pin writes, so the same logic can run against devices,
  simulators or test doubles.
- It ships no image data. `App` plays whatever sequence of `MonoImage`s you
  pass as `frames`.
- `App` draws only in render mode 0, which plays those frames in turn. Every
  other mode draws nothing, and `render` does not clear the buffer first.