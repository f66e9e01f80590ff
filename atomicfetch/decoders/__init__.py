"""Decoders package. ``atomicfetch/__init__.py`` imports each module to register it."""
