"""
elmcore CLI - Elm-style component core developer tool

Commands:
- elmcore run - Mount an example component and dispatch messages
- elmcore replay - Replay messages through an example's reducer
- elmcore version - Version information
"""

__version__ = "0.1.0"
