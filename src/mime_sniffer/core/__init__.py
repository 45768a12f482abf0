"""Signature matching, extension lookup and resolution policy."""
