"""
Service layer for Snapshot Print Flow
"""
