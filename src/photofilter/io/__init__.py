"""Pillow-backed codec, metadata and storage collaborators."""
