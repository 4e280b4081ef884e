"""
Core package.

Data models and serialization helpers shared by the layout engine,
the importers and the command line.
"""
