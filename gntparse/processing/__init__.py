"""
Corpus processing: reading tag sources and decoding them in bulk.
"""
