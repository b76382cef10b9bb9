# Index package for wordplay
"""
Dictionary indexing.

Loads a flat word list once and answers unscramble queries against it.
"""
