"""
ClientDesk: in-memory core of the clients page.
"""
