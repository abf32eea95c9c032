"""
Domain package - records, request schemas and seed data.
"""
