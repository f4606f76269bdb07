"""
Snapshot Print Flow HTTP API
"""
