"""CLI layer — argument parsing, result rendering, and the error boundary.

This package is the outermost layer.  It may import from ``core``; no
other layer may import from ``cli``.
"""
