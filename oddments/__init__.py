"""Small utilities: version ordering, multiset checks, wavelength colours, reference counting, borrow checking, tail calls and scrolling."""

__version__ = "0.1.0"