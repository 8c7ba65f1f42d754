"""
Serving — FastAPI application exposing the chunk pipeline over HTTP.
"""
