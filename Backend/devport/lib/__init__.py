"""
Shared infrastructure: WebSocket relay and monitoring.
"""
