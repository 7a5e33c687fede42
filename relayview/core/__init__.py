"""Core models, configuration and errors for relayview.
"""
