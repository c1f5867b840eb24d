from .settings import PrintSettings

__all__ = ["PrintSettings"]
