"""WhatsApp Chat Extractor — parse chat exports into structured messages."""

__version__ = "0.1.0"
