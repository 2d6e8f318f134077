"""Email-composition helpers for Neovim mail buffers."""

__version__ = "0.1.0"
