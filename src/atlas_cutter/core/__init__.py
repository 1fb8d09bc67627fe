"""Core data models shared by the parser and the cutter."""
