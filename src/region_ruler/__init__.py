"""Region naming policy for ``# region`` markers, shipped as a pylint plugin."""

__version__ = "0.1.0"
