"""
Clima package
=============

Offline climate justice engine over a bundled country dataset.

- The CLI entry point is in `clima/cli.py`.
- The score itself is in `clima/scoring.py`.
- Search, sorting and ranking live in `clima/engine.py`.
- Dataset loading is in `clima/loader.py`.
"""

__version__ = '0.1.0'
