"""Command line entry point for relayview.
"""
