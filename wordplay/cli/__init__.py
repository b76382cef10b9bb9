# CLI package for wordplay
"""
Command line interface.

Commands:
    wordplay unscramble  — Find dictionary words an input unscrambles to
    wordplay search      — Find where a word starts in a word search grid
    wordplay show        — Print the word search grid
"""
