"""
Core package - shared service base class and utilities.
"""
