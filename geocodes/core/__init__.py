"""Core configuration, constants and exceptions for geocodes."""
