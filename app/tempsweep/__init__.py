"""tempsweep - Conservative cleaner for the system temp directory.

Deletes files and folders in the temp area that provably predate the
most recent system boot, and leaves everything else alone.
"""

__version__ = "0.1.0"
