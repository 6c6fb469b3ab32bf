"""
Service layer: cross-cutting service contracts and their bundled implementations.
"""
