"""Bookmarks API HTTP layer."""
