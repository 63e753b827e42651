# plotopts

A small library with two halves:

* **Option parsing.** Declare options in groups, parse an argument list, read
  typed values back, and print aligned, word-wrapped help text.
* **Plot helpers.** Affine coordinates and points, ABGR colours, figure
  descriptions (circles, lines, paths, polygons, polylines, rectangles, text),
  and the naming scheme for plot snapshot files and the commands that record
  and replay them.

It has no runtime dependencies and supports Python 3.10 and later.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Parsing options

```python
from plotopts.options import Options
from plotopts.values import IntKind, value

options = Options("render", "Render a plot to disk")
add = options.add_options()
add("v,verbose", "Print progress")
add("o,output", "Output file", value(str).default_value("plot.png"))
add("r,resolution", "Resolution in dpi", value(IntKind.INT32), "DPI")
add("inputs", "Input files", value(list[str]))
options.parse_positional(["inputs"])

result = options.parse(["render", "-v", "--resolution=144", "a.rds", "b.rds"])

result.count("verbose")           # 1
result["resolution"].get()        # 144
result["output"].get()            # "plot.png" (the default)
result["inputs"].get()            # ["a.rds", "b.rds"]

print(options.help())
```

The first item of the list given to `Options.parse` is the program name and is
skipped. A short flag may bundle several short options (`-vq`); only the last
of them may take the next word as its argument, the others must have an
implicit value. A long option takes its argument after `=` or as the next
word. An option with an implicit value, such as a boolean, never takes the
next word. After `--` the remaining words go to the positional options.

The `ParseResult` also holds `arguments`, a list of `KeyValue` entries (long
name and raw text) in command-line order, and `unmatched`, the words that no
option took. `KeyValue.parsed(kind)` converts the raw text as an option of
that kind would.

`value()` accepts `bool`, `str`, `int`, `float`, an `IntKind`, `list[...]` of
any of these, or a function that parses a string. `Value.default_value`,
`Value.implicit_value` and `Value.no_implicit_value` return the value, so they
can be chained.

Help text can be limited to some groups with `options.help(["group"])`;
`options.groups()` lists the group names and `options.group_help(name)` returns
a `HelpGroupDetails`. `positional_help`, `custom_help`, `show_positional_help`
and `allow_unrecognised_options` adjust the usage line and parsing.

Errors are raised as exceptions from `plotopts.errors`. `OptionSpecError` is
raised for a bad declaration, such as a duplicate or malformed name.
`OptionParseError` is raised for bad input on the command line. Both derive
from `OptionError`.

Values can be parsed on their own as well:

```python
from plotopts.values import parse_bool, parse_integer, parse_list

parse_integer("-0x7f", 8, True)        # -127
parse_bool("True")                     # True
parse_list("1,2,3", int)               # [1, 2, 3]
```

## Plot helpers

```python
from plotopts.geometry import AffinePoint, Color, is_close
from plotopts.snapshot import SnapshotType, make_snapshot_name

AffinePoint.bottom_right()
Color.black().is_opaque                              # True
is_close(1.0, 1.0005)                                # True
make_snapshot_name(3, 1, 72, SnapshotType.SKETCH)    # "snapshot_sketch_3_1_72.png"
```

`plotopts.figures` holds the figure types that describe a plot in
resolution-independent affine coordinates: `CircleFigure`, `LineFigure`,
`PathFigure`, `PolygonFigure`, `PolylineFigure`, `RectangleFigure` and
`TextFigure`, with `Polyline` for point lists. Each figure has a `kind` from
`FigureKind` and a readable string form.

## What it does not do

The plot helpers only describe figures and build names and command strings.
The package does not draw or render plots, does not build figures from
recorded drawing operations, and does not run the record, replay or save
commands that `plotopts.snapshot` produces; evaluating them is left to the
caller.