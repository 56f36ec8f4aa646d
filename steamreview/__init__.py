"""Fetch Steam game reviews, save them as text or JSON, and summarise them."""

__version__ = "0.5.2"