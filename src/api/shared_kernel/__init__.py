"""Shared kernel.

Small pieces every layer may import: bearer token verification, the
permission and relation vocabularies, request correlation and the
observation context carried by probes. Nothing here imports the
authorization context or the database layer.
"""
