"""Internal modules for the monerod RPC client.

These are not intended for direct use in application code.

Modules:
    rpc - Request building, dispatch and the method table
    http - Shared HTTP client configuration
"""
