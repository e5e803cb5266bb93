from app.common.middleware.cors_middleware import register_cors_middleware
from app.common.middleware.security_middleware import (register_security_headers_middleware,
                                                       register_body_size_limit_middleware)

__all__ = [
    "register_cors_middleware",
    "register_security_headers_middleware",
    "register_body_size_limit_middleware",
]
