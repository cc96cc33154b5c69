"""Colour matrices, composition, rotation and rendering of pixel buffers."""
