"""
Test suite for the Doctors Portal API.
"""
