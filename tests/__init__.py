"""
Test suite for the notepdf project.
"""
