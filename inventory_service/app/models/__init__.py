from .materials import Material
from .logs import Log
from .bin_transactions import BinTransaction

__all__ = ["Material", "Log", "BinTransaction"]
