"""Core utilities and shared application primitives.

The CUI check-digit algorithm and the process clock are framework-agnostic;
configuration and middleware are shared by the FastAPI app.
"""
