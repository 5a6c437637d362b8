"""CUI Validator API: check Romanian company identification numbers over HTTP."""

__version__ = "1.0.0"
