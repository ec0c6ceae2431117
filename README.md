# pfckit

A toolbox of general-purpose building blocks, written with the standard
library only.

| Module | What it holds |
| --- | --- |
| `pfckit.byteorder` | `byteswap`, `byteswap_raw`, `byteswap_float`, `byteswap_double`, little and big endian `encode_*`/`decode_*`, `int_min`/`int_max`, `mul_div_size` |
| `pfckit.audio_math` | single-precision sample `scale`, `convert_to_int16`/`convert_to_int32` (with clipping) and back, `calculate_peak`, `remove_denormals`, `add_offset`, `time_to_samples`/`samples_to_time`, `gain_to_scale`/`scale_to_gain`, `decode_float16`, `decode_float24`, `decode_float24_bs` |
| `pfckit.avltree` | `AvlTree`, a sorted set of unique items ordered by a three-way comparator, with `find_nearest`, `first`, `last`, forward and reverse iteration |
| `pfckit.bit_array` | the `BitArray` / `BitArrayVar` interfaces and `SparseBitArray`, `FlatIndexBitArray`, `PermutationBitArray` |
| `pfckit.sort` | callback-driven quicksort (`sort`, `sort_stable`, `SortCallback`, `SortStabilizer`), `sort_list`, `sort_list_stable`, permutation sorting and in-place `reorder` |
| `pfckit.bsearch` | `bsearch`, `bsearch_list`, `bsearch_permutation`, `bsearch_range` |
| `pfckit.b64` | `base64_encode`, `base64_decode_estimate`, strict `base64_decode` raising `InvalidParamsError` |
| `pfckit.guid` | `Guid` (parse, format, byte layout, xor, ordering, random creation), `GUID_NULL`, `guid_compare`, `print_hex_raw` |
| `pfckit.textutil` | character-set searches, `replace_all`, case-sensitive and case-insensitive comparisons, `combine_list` |
| `pfckit.printf` | `string_printf`, a printf-style formatter supporting `%s %d %i %u %x %X %c %%`, `+` and zero-padded widths |
| `pfckit.pathutils` | slash-separated path helpers: file name, extension, parent, `combine`, illegal-character replacement, `validate_file_name` |
| `pfckit.other` | permutation helpers, `create_move_items_permutation`, `pow_int`, `exp_int`, `toggled`, `DestructNotify`, `BigMem` |
| `pfckit.filehandle` | `FileHandle`, an owning file-descriptor wrapper usable as a context manager |
| `pfckit.arrays` | `compare_arrays`, `array_equals`, `set_size_fill`, `insert_multi`, `Array2D` |
| `pfckit.nixobjects` | descriptor flags, `create_pipe`, `FdSelect` (built on `poll`), `NixEvent`, `two_event_wait`, `nix_sleep`, `read_symlink`, `self_process_path`, `get_random_data` |

## Installation

```
pip install .
```

## Examples

```python
from pfckit.avltree import AvlTree
from pfckit.b64 import base64_encode, base64_decode
from pfckit.byteorder import byteswap
from pfckit.audio_math import convert_to_int16
from pfckit.guid import Guid
from pfckit.pathutils import get_file_name, get_file_extension
from pfckit.printf import string_printf

tree = AvlTree([5, 1, 3])
list(tree)                                             # [1, 3, 5]
tree.find_nearest(4, inclusive=True, above=True)       # 5

base64_encode(b"hello")                                # 'aGVsbG8='
base64_decode("aGVsbG8=")                              # b'hello'

byteswap(0x1234, 2)                                    # 0x3412
convert_to_int16([0.5, -1.0, 2.0])                     # [16384, -32768, 32767]

g = Guid.from_text("{6B29FC40-CA47-1067-B31D-00DD010662DA}")
str(g)                                                 # '6B29FC40-CA47-1067-B31D-00DD010662DA'

get_file_name("/music/track.vgm")                      # 'track.vgm'
get_file_extension("/music/track.vgm")                 # '.vgm'

string_printf("%05d|%s", 42, "ok")                     # '00042|ok'
```

## What it does not do

- There is no command-line program; everything is used by importing modules.
- It does not play, render or emulate audio and writes no sound files;
  `pfckit.audio_math` only converts and measures sample values held in lists.
- `pfckit.nixobjects` relies on `select.poll`, pipes and `/dev/urandom`, so it
  works on POSIX systems only. `pfckit.pathutils` treats `/` as the only
  separator.

## Running the tests

```
pip install .[test]
pytest
```