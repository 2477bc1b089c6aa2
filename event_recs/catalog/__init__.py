"""
Event catalogue.

Responsibilities:
- Describe customers, events and the recursive category taxonomy.
- Load the taxonomy from its JSON source, ignoring fields we do not model.
- Flatten the taxonomy into the ordered list of bookable events.
- Keep the loaded catalogue in memory for the lifetime of the process.
"""
