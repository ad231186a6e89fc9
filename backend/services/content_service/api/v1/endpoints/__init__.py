"""
Content service API v1 endpoints.
"""
