"""
Summary: Infrastructure adapters for logging and the filesystem.
Why: Keep host-facing code out of the pure path feature packages.
"""
