"""
Posts: articles published by authors.
"""
