"""
Package whose module raises while it is imported
"""
