"""
Read-only wine ratings feature: listing, search and aggregates.
"""
