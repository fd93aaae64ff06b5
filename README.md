# oddments

A collection of small, self-contained Python utilities. Nothing here needs
third-party packages.

## Installing

```
pip install .
pip install ".[test]"   # to run the test suite with pytest
```

## What is inside

### Version-aware string ordering — `oddments.version_sorting`

`version_sorting(a, b)` compares two strings the way a human reads version
numbers: runs of digits are compared by value (`u8 < u16 < u128`), and when
values tie the string with more leading zeroes comes first (`v000 < v00 < v0`).
An underscore sorts before every other character except a space. It returns
`-1`, `0` or `1`, like an old-style comparison function.

`sorted_versions(items)` returns a new list sorted in that order.

```python
from oddments.version_sorting import sorted_versions

sorted_versions(["x86_64", "x86", "x64", "x86_32"])
# ['x64', 'x86', 'x86_32', 'x86_64']
```

### Same elements, any order — `oddments.same_elements`

`same_elements_hash(a, b)` and `same_elements_ord(a, b)` tell whether two
iterables hold the same elements with the same multiplicities, in any order.
The first needs hashable elements, the second only totally ordered ones.

```python
from oddments.same_elements import same_elements_hash

same_elements_hash([1, 1, 2], [1, 2, 1])   # True
same_elements_hash([1, 1, 2], [1, 2, 2])   # False
```

### Wavelength to colour — `oddments.wavelength`

`Converter` turns a wavelength in nanometres (visible range 380–780 nm) into a
`Color` with `r`, `g` and `b` components from 0 to 255. By default it fades the
intensity near the edges of the visible range (`FadingOptions`) and applies a
gamma of 0.8. `with_fading(None)` and `with_gamma(None)` return a copy without
those corrections. Wavelengths outside the visible range give black.

```python
from oddments.wavelength import Converter

raw = Converter().with_fading(None).with_gamma(None)
raw.wavelength_to_rgb(580.0)   # Color(r=255, g=255, b=0)
```

`remap(value, from_range, to_range)` is the linear interpolation used inside.

The `wavelength-table` command prints a colour table from 370 nm to 790 nm in
steps of 10 nm, for a terminal that supports 24-bit colour, with the corrected
and the raw colour side by side:

```
wavelength-table
```

### Reference counting — `oddments.ref_count`

`RefCount(value, finalizer=None)` holds a value together with explicit strong
and weak counts. `clone()` adds a strong handle, `downgrade()` makes a
`WeakRef`, and `drop()` (or leaving a `with` block) gives a handle up. When the
last strong handle is dropped the value is released and the finalizer, if any,
is called with it. A `WeakRef` can be `upgrade()`d back to a `RefCount` while
strong handles remain; otherwise `upgrade()` returns `None`. `try_unwrap()`
returns the value when this is the only strong handle and raises `StillShared`
otherwise; `get_mut()` returns the value only when no other handle, strong or
weak, exists. Using a handle after dropping it raises `ValueError`.

### Run-time borrow checking — `oddments.borrows`

`BorrowCell` enforces "many readers or one writer" at run time. `borrow()` and
`borrow_mut()` hand out `Ref` and `RefMut` guards and raise `AlreadyBorrowed`
on a conflict; `try_borrow()` and `try_borrow_mut()` raise
`AlreadyMutablyBorrowed` instead. A guard exposes the value as `.value`
(assignable on a `RefMut`) and holds its borrow until `release()` is called,
its `with` block ends, or it is garbage collected.

```python
from oddments.borrows import BorrowCell

cell = BorrowCell([1, 2])
with cell.borrow_mut() as guard:
    guard.value.append(3)
with cell.borrow() as reader:
    print(reader.value)   # [1, 2, 3]
```

### Tail calls without stack growth — `oddments.tailcall`

Decorate a self-recursive function with `tailcall`. While it runs, a call it
makes to itself does not nest: the arguments are evaluated, the current
invocation is abandoned, and the function starts again with them. What it
finally returns is the result of the outermost call, so only calls in tail
position behave as they read.

```python
from oddments.tailcall import tailcall

@tailcall
def countdown(n, acc=0):
    if n == 0:
        return acc
    return countdown(n - 1, acc + 1)

countdown(100_000)   # 100000, no RecursionError
```

### Scrolling a list — `oddments.scrolling`, `oddments.scrolling_ui`

`App` keeps a selected index and a scroll offset for a list of numbered items,
with `select_up`, `select_down`, `select_first`, `select_last` and
`scroll_into_view`. `scrollbar_position_from_offset` maps a scroll offset to a
scrollbar position, or `None` when everything fits.

The `scrolling-demo` command (it needs the standard `curses` module) opens a
terminal view of a list of the given number of items, with a scrollbar, a
paragraph that scrolls in step, and the current count, viewport and offset.
Use the arrow keys, Page Up/Page Down, Home and End to move, and Esc to quit:

```
scrolling-demo 200
```

## What it does not do

There are no shared-ownership handle types built on `BorrowCell`; share a
`BorrowCell` (or a `RefCount` of one) between holders yourself.