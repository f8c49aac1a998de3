"""
Summary: Domain layer of the segment model.
Why: Hold the splitter, algorithms and Path value in one pure package.
"""
