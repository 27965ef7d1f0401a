"""Multipart upload parsing and validation, uniform JSON responses, HTTP errors and request helpers."""

__version__ = "0.6.2"