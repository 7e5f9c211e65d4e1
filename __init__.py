"""
Rowtidy - Tidy the models stored in rowwise pandas frames.

Subpackages:
    - rowtidy.rowwise: Per-row tidy/augment/glance and rowwise frame building
    - rowtidy.tidiers: Tidier registry and the Tidyable protocol
    - rowtidy.common: Column references, column classification and errors

Example:
    >>> from common import col
    >>> from rowwise import rowwise_do, tidy
    >>> from tidiers import register_tidier
"""
__version__ = "0.1.0"
