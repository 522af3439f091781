"""
Sample components scanned by the package scanner tests
"""
