# passerine

Building blocks for the Passerine programming language: runtime values,
bytecode tools, source spans for error reports, a managed heap of 64-bit
slots, and `aspen`, a small command for creating Passerine packages.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

### `passerine.common`

- `number`: `split_number(n)` encodes a non-negative integer as 7-bit groups
  whose last byte has its high bit set; `build_number(data)` decodes the next
  number and returns `(value, bytes_consumed)`. Negative numbers raise
  `ValueError`.
- `opcode`: the `Opcode` enum (`Con` = 0 through `Noop` = 29) and
  `opcode_from_byte(byte)`, which returns `None` for bytes that are not
  opcodes.
- `source`: `Source`, source text with a path. `Source.from_path(path)` reads
  a file; `Source.from_string(text)` names the text `./source`.
- `span`: `Span` (a source, an offset and a length) with `point`, `combine`,
  `contents`, `lines`, `line`, `col` and `format`; `join_spans` combines many
  spans. `str(span)` gives a report such as

  ```
  In ./source:1:1
    |
  1 | heck, that's awesome
    | ^^^^^
  ```

  `FormattedSpan` holds the pieces of that report, and `Spanned` pairs an
  item with its span (`map`, `join_spanned`).
- `data`: runtime values, all subclasses of `Data`: `Float`, `Integer`
  (64-bit, checked), `Boolean`, `String`, `Unit`, `Tuple`, `Kind`, `Label`,
  `Function` and `Closure` (`Closure.wrap(lambda_)`). `str()` prints a value
  as the console would; `repr()` gives a debugging view. `Lit` and `LitLabel`
  are source literals with `to_data()`.
- `inject`: `serialize(item)` turns `None`, `bool`, `int`, `float`, `str`,
  dataclass instances and `Data` into runtime data; `deserialize(data,
  target)` goes back, raising `ValueError` on a shape mismatch. `Effect`,
  `Handler` and `EffectId` implement effect matching: `Effect.matches(handler)`
  hands over the payload once, as a one-element tuple.
- `lambda_`: `Lambda`, a chunk of bytecode with its constants, captures
  (`Local`, `Nonlocal`) and spans. It can `emit`, `emit_bytes`, `emit_span`,
  `demit`, deduplicate constants with `index_data`, look up spans with
  `index_span`, check its bytecode with `verify`, and `str(lambda_)` dumps a
  readable listing.
- `module`: `Module.from_dir(path)` loads a directory whose `main.pn` is the
  entry point; other `.pn` files and subdirectories holding `main.pn` become
  children. Problems raise `ModuleError`.

### `passerine.qualm`

- `pointer`: `Pointer`, an index whose top bit marks ownership
  (`Pointer.owned`, `add`, `borrow`, `is_owned`, `is_borrowed`).
- `slot`: `Slot`, a 64-bit word read as `to_u64`, `to_i64`, `to_f64`,
  `to_bool(bit)`, `to_byte(n)` or a pointer.
- `range_set`: `RangeSet`, bookkeeping of free slot ranges that merges
  neighbours and shrinks the heap when the tail is freed.
- `heap`: `Heap` with `alloc`, `realloc`, `read`, `read_slot`, `write`,
  `free`, and `draw_free(stream)` for a picture of fragmentation. Writing or
  freeing through a borrowed pointer raises `ValueError`.

### `passerine.aspen`

- `status`: `Status` messages (`info`, `success`, `warn`, `fatal`) written to
  standard error, coloured when it is a terminal; `AspenError` for command
  failures.
- `manifest`: `Manifest` and `PackageInfo` for `aspen.toml`
  (`Manifest.for_name`, `parse`, `find`, `to_toml`); `ManifestError`.
- `new`: `new_package(path)` creates a package.
- `cli`: the `aspen` command.

## Example

```python
from passerine.common.number import build_number, split_number
from passerine.common.source import Source
from passerine.common.span import Span

assert build_number(split_number(42069)) == (42069, 3)

source = Source.from_string("heck, that's awesome")
a = Span(source, 0, 5)
b = Span(source, 11, 2)
combined = a.combine(b)
assert (combined.offset, combined.length) == (0, 13)
print(a)
```

```python
from passerine.qualm.heap import Heap

heap = Heap()
pointer = heap.alloc(4)
pointer = heap.realloc(pointer, 4, 8)
heap.free(pointer, 8)
heap.draw_free()
```

## The `aspen` command

Create a new package in a directory (the current one by default):

```
aspen new my-package
```

This writes `aspen.toml` (version `0.0.0`, no authors, no dependencies), a
`src/` directory and `src/main.pn`. Files that already exist are left alone
with a warning. Errors are reported as `Fatal` and the command exits with
status 1.

```
aspen repl
```

reports that the interactive session is not available yet and exits with
status 1.

## What this package does not do

There is no lexer, parser, compiler or virtual machine here, so Passerine
programs cannot be compiled or run: `aspen` has no `run` command and no
working interactive session. The heap and bytecode tools are building
blocks only.