"""output subpackage."""
