# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Member Service — validated CRUD over the ``member`` table."""

__version__ = "1.0.0"
