"""Core primitives: value type, alphabets, random sources, generation."""
