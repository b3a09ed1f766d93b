"""
chromaguide/util
~~~~~~~~~~~~~~~~
"""
