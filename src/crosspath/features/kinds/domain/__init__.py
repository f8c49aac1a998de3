"""
Summary: Domain layer of the kind-tagged paths.
Why: Hold classification and wrappers that never touch the filesystem.
"""
