"""CourtLens — court case status lookup with AI case insights."""

__version__ = "0.1.0"
