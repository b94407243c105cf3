"""
Comments: replies left by authors on posts.
"""
