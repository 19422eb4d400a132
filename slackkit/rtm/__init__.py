from .client import RtmClient

__all__ = ["RtmClient"]
