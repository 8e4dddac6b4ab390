"""
Pydantic schemas.
"""
