"""Home-screen content feed: download, normalize and query the published feed."""

__version__ = "0.1.0"
