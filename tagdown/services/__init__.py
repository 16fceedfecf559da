"""Services (external collaborators) used by tagdown conversions."""

from .base import Service, ServiceManager
from .window import BeautifulSoupWindowService, ComputedStyle, Window, WindowService

__all__ = [
    "Service",
    "ServiceManager",
    "WindowService",
    "Window",
    "ComputedStyle",
    "BeautifulSoupWindowService",
]
