# devport/api/__init__.py
"""
API route modules.
"""
