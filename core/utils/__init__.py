"""Helper functions"""
