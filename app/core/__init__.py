"""
Core functionality for the YouTube transcript summarization application.

This package contains the two provider proxies: fetching transcripts and
summarizing them with a language model.
"""
