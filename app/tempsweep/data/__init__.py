"""Bundled data files for tempsweep."""
