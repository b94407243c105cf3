"""
Authors: the people who write posts and comments.
"""
