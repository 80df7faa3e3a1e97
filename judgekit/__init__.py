"""Solutions to classic online-judge exercises, with a command for some of them."""

__version__ = "0.1.0"