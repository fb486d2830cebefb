"""
Command line examples for arburg.
"""
