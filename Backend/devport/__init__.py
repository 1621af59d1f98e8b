# devport/__init__.py
"""
DevPort backend: DevStudio code playground and CreativePort portfolio builder.
"""
