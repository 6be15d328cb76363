"""
gethttp
Description: Issues a single HTTP/1.1 GET request, optionally through the proxy
             named by the http_proxy environment variable, and streams the raw
             response to stdout with step-by-step diagnostics.
License: MIT License
"""

__version__ = "0.1.0"
