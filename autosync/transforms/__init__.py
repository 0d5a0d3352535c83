"""Content transforms applied while materializing posts."""
