from .binary import first_diff_index, render_window

__all__ = ["first_diff_index", "render_window"]
