"""Runner that compiles, tests and tracks small Rust exercises, with worked solutions."""

__version__ = "1.0.0"