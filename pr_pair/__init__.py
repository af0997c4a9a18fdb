# AGPL-3.0 License

"""
PR Pair: generates a review checklist for the files changed between two git refs.
"""

__version__ = "0.1.0"
