# d2shared

Building blocks for reading the data files of a classic isometric action
role-playing game. The package includes:

- little-endian stream readers and writers
- bit-level readers
- tab-separated data tables
- `.tbl` string tables
- the animation data table
- COF composite animation files
- the adaptive Huffman and ADPCM decompressors used inside the game's archives

It is pure Python and needs nothing outside the standard library.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | What it provides |
| --- | --- |
| `d2shared.stream_reader` | `StreamReader`: little-endian integer reads (`get_byte`, `get_uint16` … `get_int64`), `read_bytes`, `skip_bytes`, `read`, `eof`, a settable `position` |
| `d2shared.stream_writer` | `StreamWriter`: `push_byte`, `push_uint16`, `push_int16`, `push_uint32`, `push_uint64`, `push_int64`, `to_bytes` |
| `d2shared.bitstream` | `BitStream`: reads groups of up to 16 bits, least significant first |
| `d2shared.bitmuncher` | `BitMuncher`, a bit-offset reader, and `make_signed` for sign extension |
| `d2shared.geometry` | `Rectangle` (`bottom`, `right`, `contains`) and `Path` |
| `d2shared.build_info` | `BuildInfo`, `set_build_info`, `current_build_info` |
| `d2shared.data_dictionary` | `DataDictionary` for tab-separated tables, and the `CalcString` type |
| `d2shared.enums` | `Hero`, `WeaponClass`, `CompositeType`, `AnimationMode`, `AnimationFrame`, `DrawEffect`, `PaletteType`, `RegionId` and others |
| `d2shared.interfaces` | `FileProvider` and `InventoryItem` protocols |
| `d2shared.resources` | Constants for resource paths |
| `d2shared.text_dictionary` | `TextDictionary` and `load_text_dictionary` for `.tbl` string tables |
| `d2shared.animation_data` | `AnimationDataRecord`, `parse_animation_data`, `load_animation_data` |
| `d2shared.cof` | `Cof`, `CofLayer`, `parse_cof`, `load_cof` |
| `d2shared.wav` | `wav_decompress`, which decodes compressed ADPCM blocks into 16-bit PCM |
| `d2shared.huffman` | `huffman_decompress` for adaptive Huffman blocks |

## Examples

### Reading and writing little-endian values

```python
from d2shared.stream_reader import StreamReader
from d2shared.stream_writer import StreamWriter

writer = StreamWriter()
writer.push_uint32(0x12345678)
reader = StreamReader(writer.to_bytes())
assert reader.get_uint32() == 0x12345678
assert reader.eof()
```

### Reading bits

```python
from d2shared.bitstream import BitStream

bits = BitStream(bytes([0xAA]))
assert bits.read_bits(1) == 0
assert bits.read_bits(1) == 1
```

### Looking up values in a data table

Lines are separated by `\r\n` and the first line holds the column names.

```python
from d2shared.data_dictionary import DataDictionary

table = DataDictionary.from_text("name\tlevel\r\nzombie\t3")
assert table.get_string("name", 0) == "zombie"
assert table.get_number("level", 0) == 3
```

### Working with enums

```python
from d2shared.enums import Hero, WeaponClass

assert Hero.from_string("Paladin").token() == "PA"
assert WeaponClass.from_string("hth") is WeaponClass.HAND_TO_HAND
assert str(WeaponClass.BOW) == "bow"
```

### Loading game files

Game files are loaded through a `FileProvider`. This is any object with a
`load_file(file_name)` method that returns the file's bytes.

```python
from d2shared.cof import load_cof

class DictProvider:
    def __init__(self, files):
        self.files = files

    def load_file(self, file_name):
        return self.files.get(file_name, b"")

provider = DictProvider({})
cof = load_cof("/data/global/chars/pa/cof/panuhth.cof", provider)
assert cof.number_of_layers == 0  # empty file data gives an empty Cof
```

`load_text_dictionary(provider)` reads the patch, expansion and base string
tables, in that order. When more than one table defines a key, the first one
wins. `load_animation_data(provider)` reads the animation data table and
groups its records by lower-cased COF name.

## Errors

Malformed or truncated data raises an exception; no status value is returned.
The exceptions used are `EOFError`, `ValueError`, `KeyError` and `IndexError`.

## What the package does not do

The package does not open game archives and does not locate game files on
disk. Every loader takes a `FileProvider` that you supply.

It also does not include:

- a renderer or audio playback
- a command-line tool

Huffman compression type 0 is not supported and raises `ValueError`.