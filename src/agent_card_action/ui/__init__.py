"""User-facing rendering.

Key modules:
    - reporting: Markdown job summary rendering
"""

from .reporting import render_summary_md

__all__ = ["render_summary_md"]
