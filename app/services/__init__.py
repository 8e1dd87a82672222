"""
Services package initialization.
This file makes the services directory a proper Python package.
"""

from .countdown import CountdownRenderer, render_countdown_gif, register_fonts

__all__ = ['CountdownRenderer', 'render_countdown_gif', 'register_fonts']
