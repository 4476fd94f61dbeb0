"""Cross-cutting infrastructure shared by the parser layers."""
