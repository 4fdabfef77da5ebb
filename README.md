# vugu

Support pieces for web user interfaces rendered from a virtual DOM:
structural data hashing for change detection, DOM event handler
descriptions with a shared read/write lock, integer codes for well-known
HTML names, and character-encoding detection for HTML documents. It also
has a few helpers for assembling a site's distribution directory.

## What is inside

- `vugu.datahash`: `compute_hash()` walks a data structure and returns a
  stable 64-bit hash. Compare hashes to tell whether anything has changed.
  `None` hashes to 0. Mappings are hashed in key-hash order, so insertion
  order does not matter. Attributes whose names start with an underscore
  are skipped on objects and dataclasses. An object can supply its own hash
  by implementing `DataHasher.data_hash()`.
- `vugu.events`: `DOMEventHandler` describes a method call bound to a DOM
  event. Its `hash()` combines `receiver_and_method_hash` with the hashes of
  its `args`, and is 0 when there is neither a method nor any arguments.
  `EventEnv` is a read/write lock that rendering and event handlers share.
  It provides `lock`, `unlock_only`, `unlock_render`, `rlock` and `runlock`.
  `unlock_render` also posts a render request, without blocking, to the
  queue given when the `EventEnv` was created. `DOMEvent` wraps an event
  object. `DOM_EVENT_STUB` is a placeholder argument that means "the
  incoming event".
- `vugu.htmlx.atom`: `Atom` codes for well-known HTML tag and attribute
  names. `lookup()` finds an atom by name and is case sensitive. It returns
  `Atom(0)` when there is no match. `string()` returns the atom's name, or
  the input unchanged when there is no atom for it.
- `vugu.htmlx.atom_table`: the precomputed table behind the atoms.
  `known_atoms()` returns a mapping of every atom name to its code.
- `vugu.htmlx.charset`: decides the encoding of an HTML document. It looks
  at the byte-order mark, then the declared content type, then `<meta>`
  tags, and finally checks for valid UTF-8; otherwise it falls back to
  windows-1252. `lookup()` maps WHATWG labels to an `HTMLEncoding`, which
  has `decode()` and `encode()`. `encode()` writes characters the encoding
  cannot represent as `&#NNN;`. `new_reader()` and `new_reader_label()`
  wrap a binary stream so that it yields UTF-8.
- `vugu.distutil.copy_files`: `copy_dir_filtered()` and `copy_file()` copy
  static assets. Files whose size and modification time (to the second)
  already match are skipped.
- `vugu.distutil.execute`: `env_exec()` and `run()` run a command and
  return its combined output. They add the `bin` directory under
  `go env GOPATH` to `PATH`, so a `go` executable must be available. A
  failure raises `ExecError`.
- `vugu.distutil.wasm_exec_js`: `wasm_exec_js_path()` finds
  `misc/wasm/wasm_exec.js` under `go env GOROOT`.

## Examples

Hashing data to detect changes:

```python
from vugu.datahash import compute_hash

before = compute_hash({"title": "Hello", "items": [1, 2, 3]})
after = compute_hash({"items": [1, 2, 3], "title": "Hello"})
assert before == after
```

Describing an event handler:

```python
from vugu.events import DOMEventHandler

handler = DOMEventHandler(receiver_and_method_hash=42, method=print, args=["clicked"])
print(handler.hash())
```

Looking up HTML atoms:

```python
from vugu.htmlx import atom

a = atom.lookup(b"div")
print(str(a))                    # div
print(int(atom.lookup(b"DIV")))  # 0: lookups are case sensitive
```

Sniffing the encoding of an HTML document:

```python
from vugu.htmlx import charset

encoding, name, certain = charset.determine_encoding(
    b'<meta charset="iso-8859-15"><p>caf\xe9</p>', "text/html"
)
print(name, certain)              # iso-8859-15 False
print(encoding.decode(b"caf\xe9"))  # café
```

Preparing a distribution directory:

```python
from vugu.distutil.copy_files import copy_dir_filtered, copy_file
from vugu.distutil.wasm_exec_js import wasm_exec_js_path

copy_dir_filtered("site", "site/dist", None)   # default static-file pattern
copy_file(wasm_exec_js_path(), "site/dist/wasm_exec.js")
```

`copy_dir_filtered` skips the destination directory when it lies inside
the source directory. A pattern of `None` selects
`DEFAULT_FILE_INCL_PATTERN`, which matches the usual static web assets:
stylesheets, scripts, HTML, source maps, images, fonts and WebAssembly.

## What this package does not do

This package has no component registry, no component instances and no
rendering environment. Nothing here builds a virtual DOM, turns one into
HTML, or keeps a browser DOM in sync. `DOMEvent` only records what it is
given: `prevent_default()` sets `default_prevented`, and `request_render()`
forwards to its `EventEnv`. The package has no command-line tools.