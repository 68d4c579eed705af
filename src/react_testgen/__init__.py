"""Generate skeletal test files for React components that lack one."""

__version__ = "0.1.0"
