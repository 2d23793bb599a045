"""Renderers from the type model to target source text.

Primary Class:
    DamlRenderer: Render an IRModule as a DAML module
"""

from cdm_metagen.render.daml import (
    DamlRenderer,
    EmptyVariantError,
    RenderError,
    UnsupportedTypeError,
)
from cdm_metagen.render.layout import CommentPosition, paragraph_fill, render_comment

__all__ = [
    "DamlRenderer",
    "RenderError",
    "UnsupportedTypeError",
    "EmptyVariantError",
    "CommentPosition",
    "paragraph_fill",
    "render_comment",
]
