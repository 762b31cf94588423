"""
Shared utilities used by the client.

- http.py - requests.Session factory with retry, timeout and headers
"""
