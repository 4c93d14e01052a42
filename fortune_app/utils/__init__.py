"""
Utility functions module.

Calendar month arithmetic and timestamp helpers shared by the data
model and the synthesizer.

Time Semantics:
- Periods are whole calendar months, identified by (year, month)
- A period's timestamp is the UTC epoch milliseconds of its first day
- Day-of-month never influences which periods a span contains
"""
