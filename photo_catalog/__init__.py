"""
Read-only catalog of photography collections stored in an S3 bucket.

Collections, photo pairs, the splash image and bucket statistics are all
derived from key-naming conventions on every request.
"""

__version__ = "1.0.0"
