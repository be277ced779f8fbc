"""
apiguard - Request validation layer for a generative AI API

Request models and purpose-aware validators for file uploads, text and
image responses and image variations, producing descriptive diagnostics
before a request is forwarded upstream.
"""
