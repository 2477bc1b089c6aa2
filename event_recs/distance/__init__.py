"""
Distance lookup layer.

Responsibilities:
- Define the contract of the external distance service.
- Provide a simulated, intermittently failing service for demos and tests.
- Memoize distances per unordered city pair for the whole session.
- Retry failed lookups a bounded number of times and fall back to a
  sentinel "infinitely far" distance instead of failing the caller.
"""
