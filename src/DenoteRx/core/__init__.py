"""Core data types: pattern nodes, fields and errors."""
