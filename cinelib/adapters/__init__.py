"""Adaptateurs : CLI, client HTTP, lecteur video."""
