"""rootkeeper - Root folder registry for media libraries.

Registers top-level library folders and reports which of their
subdirectories are not yet tracked as library items.
"""

__version__ = "0.1.0"
