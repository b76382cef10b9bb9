# Search package for wordplay
"""
Word search grid solving.
"""
