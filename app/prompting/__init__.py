"""Prompting package.

This package contains deterministic payload-construction helpers used by the core
pipeline. It does not perform transport, response parsing, or formatting.
"""
