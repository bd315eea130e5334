"""Small helpers shared by the services."""

from zcv.utils.filenames import safe_filename

__all__ = ["safe_filename"]
