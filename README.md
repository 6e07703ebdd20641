# pocketkit

A pocket collection of small command-line tools and helper libraries.
Each tool does one job and is also usable as a plain Python function.

## Installation

```
pip install pocketkit
```

To run the test suite:

```
pip install "pocketkit[test]"
pytest
```

## Command-line tools

| Command          | What it does |
|------------------|--------------|
| `pk-dup`         | Prints lines that occur more than once in standard input or in the named files, with their counts (and, for files, which files hold them). |
| `pk-echo`        | Prints its arguments; `-n` omits the trailing newline, `-s SEP` sets the separator. |
| `pk-cf`          | Reads each argument as Fahrenheit and as Celsius and prints the conversions, including Kelvin. |
| `pk-length`      | Converts lengths between meters and feet, from arguments or from lines of standard input. |
| `pk-fetch`       | Fetches URLs (adding `http://` if missing) and copies status and body to standard output; `--all` fetches in parallel and reports times and sizes. |
| `pk-server`      | Runs a tiny WSGI server: `echo` (default), `counter` or `request`; `--addr` sets the address (default `localhost:8000`). |
| `pk-lissajous`   | Writes an animated GIF of a random Lissajous figure; `web` serves them on `localhost:8000`, with an optional `cycles` parameter. |
| `pk-mandelbrot`  | Writes a 1024×1024 PNG of the Mandelbrot set to standard output. |
| `pk-basename`    | Strips directories and the last suffix from each line of standard input. |
| `pk-comma`       | Inserts thousands separators into each numeric argument. |
| `pk-surface`     | Serves an SVG rendering of the surface sin(r)/r; `--addr` sets the address. |
| `pk-slices`      | Demonstrates slice growth and reversal, then reverses each line of integers from standard input. |
| `pk-charcount`   | Counts Unicode characters, UTF-8 encoding lengths and invalid bytes in standard input. |
| `pk-dedup`       | Prints each distinct input line once, in first-seen order. |
| `pk-issues`      | Searches the GitHub issue tracker and prints a table; `--html` or `--report` choose other layouts. |
| `pk-jpeg`        | Reads a PNG or JPEG image on standard input and writes it as JPEG. |
| `pk-bzip`        | Compresses standard input with bzip2 to standard output. |

Examples:

```
$ pk-echo -s , a b c
a,b,c
$ pk-comma 1234567890
  1,234,567,890
$ pk-mandelbrot > mandelbrot.png
$ pk-mandelbrot | pk-jpeg > mandelbrot.jpg
$ pk-bzip < notes.txt > notes.txt.bz2
```

## Library

```python
from pocketkit.tempconv import Celsius, c_to_f
from pocketkit.popcount import pop_count
from pocketkit.word import is_palindrome
from pocketkit.equal import equal

print(c_to_f(Celsius(100)))                             # 212°F
print(pop_count(0x1234567890ABCDEF))                    # 32
print(is_palindrome("A man, a plan, a canal: Panama"))  # True
print(equal([1, 2, 3], [1, 2, 3]))                      # True
```

Other modules:

- `pocketkit.dup` – `count_lines`, `count_by_file`, `split_count`
- `pocketkit.echo` – `echo(newline, sep, args, out)`
- `pocketkit.tempconv` – `Celsius`, `Fahrenheit`, `Kelvin`, `c_to_f`, `f_to_c`, `c_to_k`
- `pocketkit.lengthconv` – `Feet`, `Meters`, `f_to_m`, `m_to_f`, `convert_length`
- `pocketkit.popcount` – `pop_count`, `pop_count_loop`, `pop_count_shift`, `pop_count_clear`
- `pocketkit.fetch` – `fetch`, `fetch_timed`, `fetch_all`
- `pocketkit.servers` – WSGI apps `path_app`, `request_app` and `CounterApp`
- `pocketkit.lissajous` – `lissajous`, `lissajous_app`
- `pocketkit.mandelbrot` – `mandelbrot`, `acos`, `sqrt`, `newton`, `render`
- `pocketkit.basename` and `pocketkit.comma` – file-name and number-string helpers
- `pocketkit.surface` – `f`, `eggbox`, `corner`, `minmax`, `color`, `render_svg`
- `pocketkit.netflag` – `Flags`, `is_up`, `turn_down`, `set_broadcast`, `is_cast`
- `pocketkit.slices` – `IntSlice`, `append_int`, `append_slice`, `nonempty`, `reverse`, `ints_to_string`
- `pocketkit.charcount` – `char_count` returning `CharCounts`
- `pocketkit.dedup` – `dedup`
- `pocketkit.graph` – `Graph` with `add_edge` and `has_edge`
- `pocketkit.treesort` – `sort`, an in-place binary-tree sort
- `pocketkit.github` and `pocketkit.issues` – `search_issues`, `format_table`, `render_html`, `render_report`
- `pocketkit.movie` – `Movie`, `marshal`, `titles`
- `pocketkit.jpeg` – `to_jpeg`
- `pocketkit.format` and `pocketkit.display` – `format_any`, `format_atom` and `display`
- `pocketkit.bzip` – `Writer`, a bzip2-compressing writer with `write` and `close`

## What it does not do

The package has no S-expression encoder or decoder, no printer of a
value's method set, and no endpoint that decodes query parameters into
typed fields. `pocketkit.display` prints plain values, containers,
dataclasses and ordinary objects; it does not look at methods.