"""Core infrastructure for tempsweep.

Application paths and console theme configuration.
"""
