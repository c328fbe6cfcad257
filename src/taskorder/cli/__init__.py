"""
Command line interface for taskorder
"""
