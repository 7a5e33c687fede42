"""Utility helpers for relayview.
"""
