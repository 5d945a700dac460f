# -*- coding: utf-8 -*-
"""Health log domain.

Collects daily health metrics submitted by the web form and keeps them in an
ordered, append-only, in-process store.
"""

from .errors import LogStoreError, ProcessingError, ValidationError
from .storage import LogStore

__all__ = [
    'LogStore',
    'LogStoreError',
    'ProcessingError',
    'ValidationError',
]
