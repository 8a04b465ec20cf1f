"""HTTP API for the library catalog"""
