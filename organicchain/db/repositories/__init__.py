"""
Per-domain repository modules for database access.

Route handlers call these functions instead of building queries inline.
"""
