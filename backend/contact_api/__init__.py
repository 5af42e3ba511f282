"""Contact Directory API: contacts, profile pictures, message threads and a login check."""

__version__ = "1.0.0"
