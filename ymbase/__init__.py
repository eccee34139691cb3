"""Basic utilities: JSON values and files, binary I/O, mt19937, message types, file locations, binders and interval timers."""

__version__ = "0.1.0"