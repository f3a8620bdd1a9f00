"""metaclean - strip camera, GPS and timestamp metadata from photos in bulk."""

__app_name__ = "metaclean"
__version__ = "0.1.0"
