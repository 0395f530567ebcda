from .layouts import base_layout, class_colors
from .draw import draw_canonical_form, draw_similarity_bags

__all__ = [
    "base_layout",
    "class_colors",
    "draw_canonical_form",
    "draw_similarity_bags",
]
