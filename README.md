# structbuilder

`structbuilder` gives a dataclass a companion builder object. The builder has
one chainable setter per field. It checks that every required field was set
before it creates the instance.

## Installation

```
pip install structbuilder
```

## Usage

Decorate a class with `structbuilder.builder.builder`. If the class is not
already a dataclass, the decorator turns it into one first. It then attaches a
`builder()` class method. That method returns a fresh `<Name>Builder` object,
a subclass of `Builder`, with every field unset.

```python
from dataclasses import dataclass
from typing import Optional

from structbuilder.builder import builder, builder_field


@builder
@dataclass
class Command:
    executable: str
    args: list[str] = builder_field(each="arg")
    env: list[str] = builder_field(each="env")
    current_dir: Optional[str] = None


command = (
    Command.builder()
    .executable("cargo")
    .arg("build")
    .arg("--release")
    .build()
)

assert command.executable == "cargo"
assert command.args == ["build", "--release"]
assert command.env == []
assert command.current_dir is None
```

### Setters

Each field that `__init__` accepts gets a setter named after it. The setter
stores the value and returns the builder, so calls can be chained. Fields
declared with `init=False` get no setter.

### Optional fields

A field annotated as `Optional[T]` or `T | None` may be left unset. Its value
in the built instance is then `None`. String annotations, as written under
`from __future__ import annotations`, are recognised too.

### Repeated fields

A list field (annotated literally as `list[T]` or `List[T]`) declared with
`builder_field(each="name")` gets a setter called `name` that appends one item
at a time. The list starts out empty, so such a field never counts as missing.
If the per-item name differs from the field name, the field's own setter is
also generated and replaces the whole list.

If the per-item name is the same as the field name, only the per-item setter
is generated.

### Building

`Builder.build()` returns the finished instance. It raises `BuilderError` if any
required field was never set. After a successful build the builder's values
are cleared.

```python
from structbuilder.builder import BuilderError

try:
    Command.builder().arg("build").build()
except BuilderError as exc:
    print(exc)
    # Could not build Command struct, as one or more required fields were left unset
```

### Declaration errors

`BuilderAttributeError`, a subclass of `BuilderError`, is raised for field
declarations that cannot be honoured:

- an unknown keyword passed to `builder_field`;
- an `each` value that is not a valid Python identifier;
- `each=` on a field whose type is not written as a list.

Applying `builder` to something that is not a class raises `TypeError`.