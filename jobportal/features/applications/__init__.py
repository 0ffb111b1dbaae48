"""Job applications."""

from .apply import ApplyService

__all__ = ['ApplyService']
