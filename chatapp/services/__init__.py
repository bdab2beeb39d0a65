"""
Chat app services.
"""
