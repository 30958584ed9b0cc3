"""
Parsers sub-package for dialect-ingest.

Contains row parsers that turn raw delimited text into a standardized
intermediate representation (``RawDataset``: header + DataFrame of raw
string cells).

Design: Strategy Pattern
- base.py defines the BaseParser ABC (protocol) and RawDataset.
- dsv.py implements DSVParser for comma/semicolon separated text.

The reader (reader.py) picks the delimiter (configured or detected by
detect.py) and hands it to the parser.
"""
