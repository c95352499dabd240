"""A multi-threaded CPU path tracer."""

__version__ = "0.1.0"
