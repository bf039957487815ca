from providers.base import ListingProvider
from providers.wca_provider import WCAProvider

__all__ = ["ListingProvider", "WCAProvider"]
