"""
Data models and birth date validation.
"""
