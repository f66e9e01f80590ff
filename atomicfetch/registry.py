"""Codec to decoder mapping, filled by the ``@register`` class decorator.

Each module under ``atomicfetch.decoders`` registers exactly one decoder
class when imported; ``atomicfetch/__init__.py`` imports all of them.
"""

from __future__ import annotations

from typing import Callable

from atomicfetch.decoders.base import BaseDecoder
from atomicfetch.detector import Codec


class UnsupportedCodecError(Exception):
    pass


_registry: dict[Codec, type[BaseDecoder]] = {}


def register(codec: Codec) -> Callable[[type[BaseDecoder]], type[BaseDecoder]]:
    """Register a :class:`BaseDecoder` subclass as the decoder for ``codec``.

    Raises:
        TypeError: the decorated class is not a ``BaseDecoder``.
        ValueError: ``codec`` already has a decoder.
    """

    def decorator(cls: type[BaseDecoder]) -> type[BaseDecoder]:
        if not (isinstance(cls, type) and issubclass(cls, BaseDecoder)):
            raise TypeError(f"{cls!r} is not a BaseDecoder subclass")
        if codec in _registry:
            raise ValueError(
                f"codec {codec.value} already handled by {_registry[codec].__name__}"
            )
        _registry[codec] = cls
        return cls

    return decorator


def get_decoder(codec: Codec) -> BaseDecoder:
    """Instantiate the decoder registered for ``codec``."""
    try:
        cls = _registry[codec]
    except KeyError:
        raise UnsupportedCodecError(f"No decoder registered for codec: {codec.value}") from None
    return cls()
