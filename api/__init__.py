"""API layer - router, routes, events and response envelopes"""
