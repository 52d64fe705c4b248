"""preview subpackage."""
