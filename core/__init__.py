"""Library catalog core: the in-memory catalog store and settings"""
