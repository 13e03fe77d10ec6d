"""Reference page renderer for the grcli command grammar."""

__version__ = "0.1.0"
