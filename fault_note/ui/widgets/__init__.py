"""Widgets package"""
from .menu_list import render_target_list
from .field_box import render_field_box

__all__ = [
    'render_target_list',
    'render_field_box',
]
