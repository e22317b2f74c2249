"""Etsy listing viewer: a listing-details page plus a stub backend."""

from .resolver import extract_listing_id
from .viewer import ListingDetails, ListingViewer

__all__ = ["extract_listing_id", "ListingDetails", "ListingViewer"]
