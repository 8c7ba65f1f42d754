"""Attribute field names shared with the downstream index.

The index and its consumers look these keys up by name, so they must not
change.
"""

TITLE = "title"
LINK = "link"
CHUNK_TEXT = "chunk_text"
