"""Release bookkeeping for the PowerShell editor repositories."""

__version__ = "0.1.0"
