"""
Domain Interfaces (Ports)
"""

from .clients import AlipayBillClient

__all__ = [
    "AlipayBillClient",
]
