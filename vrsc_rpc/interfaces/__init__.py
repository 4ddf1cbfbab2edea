"""Protocol interfaces for the Verus RPC client."""
from .transport import Transport

__all__ = ["Transport"]
