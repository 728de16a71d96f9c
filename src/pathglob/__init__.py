# pathglob: path normalization, wildcard matching, and recursive glob expansion.
# Import from the submodules directly (pathglob.paths, pathglob.patterns,
# pathglob.traverse, pathglob.fileops); nothing is re-exported here.

__all__ = [
    "__version__",
]

# Keep in step with the version in pyproject.toml.
__version__ = "0.1.0"
