"""
Resolution modules for roundtrip
"""

from .identifier import Identifier, IdentifierType, classify
from .lookup import BaseLookup, SystemLookup, DnsPythonLookup, create_lookup
from .roundtrip import RoundTripResolver

__all__ = [
    'Identifier', 'IdentifierType', 'classify',
    'BaseLookup', 'SystemLookup', 'DnsPythonLookup', 'create_lookup',
    'RoundTripResolver',
]
