# -*- coding: utf-8 -*-
"""
Markup Cleaner - turns rich-text editor HTML into minimal semantic markup.
"""
__version__ = "1.0.0"

from .formatter import beautify, minify  # noqa: E402
from .pipeline import normalize  # noqa: E402

__all__ = ["normalize", "beautify", "minify", "__version__"]
