"""Adaptateurs web : recuperation des pages de films."""

from cinelib.adapters.web.page_fetcher import HttpPageFetcher

__all__ = ["HttpPageFetcher"]
