"""
Pydantic schema definitions for API payloads.

Each domain (concerts, performers, parolees) defines its own models
for request and response bodies.
"""
