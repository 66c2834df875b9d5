"""Local filesystem reader for front matter documents.

This package provides :func:`parse_file`, which reads a document from
disk and parses it with :func:`frontmatter_core.parse`, auto-detecting
the comment convention from the file extension.

Install::

    pip install frontmatter-sdk
"""

from frontmatter_fs.local import DEFAULT_MAX_FILE_BYTES, parse_file, read_document

__all__ = ["DEFAULT_MAX_FILE_BYTES", "parse_file", "read_document"]
