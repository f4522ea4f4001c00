"""Terminal chat UI building blocks: layout, text handling, spinners and widgets drawn onto an in-memory cell canvas."""

__version__ = "0.1.0"