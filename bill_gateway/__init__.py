"""
Bill Gateway - Alipay Balance & Account Log Service

A FastAPI-based microservice that proxies signed Alipay OpenAPI bill
queries and generates HMAC signatures for webhook robots.
"""

__version__ = "0.1.0"
