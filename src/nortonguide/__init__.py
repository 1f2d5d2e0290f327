"""
nortonguide - Norton Guide file library for Python

A pure Python library for reading Norton Guide and Expert Help (.NG) files.
"""

from .lib.guide import Guide, open_guide
from .lib.exceptions import NGError, NotAGuideError, MalformedStructureError, GuideReadError

__version__ = "0.0.1"

__all__ = [
    "Guide",
    "open_guide",
    "NGError",
    "NotAGuideError",
    "MalformedStructureError",
    "GuideReadError",
]
