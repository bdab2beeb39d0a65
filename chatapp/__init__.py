"""
Chat app backend: authentication, profile management and conversation muting.
"""
