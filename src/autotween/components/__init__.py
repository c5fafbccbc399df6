"""UI components built on tweenable properties"""

from .layout_element import LayoutElement, Tweenable

__all__ = ['LayoutElement', 'Tweenable']
