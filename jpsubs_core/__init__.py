"""
jpsubs_core: normalization pipeline for Japanese TV/web subtitles.
"""
