"""Bundled data files for rootkeeper."""
