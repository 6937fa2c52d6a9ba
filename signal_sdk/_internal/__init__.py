"""Internal modules for the Signal SDK.

WARNING: These modules back SignalClient and are not a stable API.

Modules:
    dispatch - Endpoint catalog and request dispatch engine
    http - Shared HTTP client configuration
    debug - Opt-in debug logging to stderr
"""
