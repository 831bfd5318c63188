"""Example definitions and scripts for npcstate.

This package demonstrates library usage but is not part of the core API.
"""
