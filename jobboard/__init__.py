"""
Job Board Platform API.
"""
