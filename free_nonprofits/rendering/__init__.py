"""Rendering helpers for the human-readable service listing."""

from .markdown import render_listing

__all__ = ["render_listing"]
