"""API route modules: health, cases, insights."""
