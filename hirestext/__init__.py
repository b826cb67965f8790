"""Software text screen rendered into bitmap buffers, with a VT52 interpreter."""

__version__ = "0.5.0"
__all__ = ["config", "font4x8", "font5x8", "renderers", "screen", "vt52"]