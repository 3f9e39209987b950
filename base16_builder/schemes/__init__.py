from .store import load_schemes

__all__ = ["load_schemes"]
