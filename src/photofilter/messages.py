"""User-facing notification texts shared by the preview and export paths."""

MESSAGE_SAVED = "Image saved"
MESSAGE_LOAD_FAILED = "Failed to load image"
MESSAGE_SAVE_FAILED = "Failed to save image"

__all__ = ["MESSAGE_LOAD_FAILED", "MESSAGE_SAVED", "MESSAGE_SAVE_FAILED"]
