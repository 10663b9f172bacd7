from .structured_logger import StructuredLogger

__all__ = ["StructuredLogger"]
