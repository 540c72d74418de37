"""
Service layer.

``ConcertStore`` keeps concerts in memory; ``PerformerService`` and
``ParoleeService`` wrap the SQLite tables.  API handlers depend only on
these classes.
"""
