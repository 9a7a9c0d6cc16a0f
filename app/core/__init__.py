"""
Core architecture components for the credit application
"""
