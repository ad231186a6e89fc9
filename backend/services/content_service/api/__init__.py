"""
Content Service API Package
"""
