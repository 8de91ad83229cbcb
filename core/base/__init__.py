"""Service base classes"""
