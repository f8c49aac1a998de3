"""
Summary: Feature packages for the segment model and the kind-tagged layer.
Why: Group the pure path domain apart from platform adapters.
"""
