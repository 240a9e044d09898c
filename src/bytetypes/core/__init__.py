"""
Core domain models, conversion math, and payload contracts.

Independent of any text representation: parsing and formatting live in
bytetypes.text.
"""
