"""parsing subpackage."""
