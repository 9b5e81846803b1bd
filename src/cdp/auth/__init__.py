"""
Auth - request authentication for the CDP REST API.

Bearer tokens are short-lived JWTs signed with the API key secret
(PyJWT + cryptography).
"""

from .jwt import JwtOptions, generate_jwt

__all__ = ["JwtOptions", "generate_jwt"]
