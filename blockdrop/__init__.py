"""blockdrop: a falling-block puzzle engine with a pygame front end."""

__version__ = "0.1.0"
