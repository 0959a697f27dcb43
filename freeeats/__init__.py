"""FreeEats: crowdsourced free food on campus."""

__version__ = "0.1.0"
