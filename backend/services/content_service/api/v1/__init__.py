"""
Content Service API v1 Package

Version 1 exposes the content repository over REST. All request and response
bodies use the camelCase application shape.
"""
