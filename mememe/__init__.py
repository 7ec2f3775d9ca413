"""
MemeMe: pick a photo, caption it image-macro style, share the result.
"""

__version__ = "0.1.0"
