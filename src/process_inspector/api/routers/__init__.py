"""API routers"""

from . import process_instances, monitoring

__all__ = ["process_instances", "monitoring"]
