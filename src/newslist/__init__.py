"""newslist: fetch a news list and project it for a presentation layer."""

__version__ = "0.1.0"
