"""FossBOX catalog browser: carousel, search and paginated grid controllers."""

__version__ = "2.0.0"
