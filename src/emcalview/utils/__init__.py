"""Utilities shared by the containers and the data structures.

- `logger`: package-wide logger
- `config`: YAML configuration loader
- `factory`: instantiates classes from configuration blocks
- `enums`: enumerated rejection reasons
"""
