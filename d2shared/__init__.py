"""Stream and bit readers, data tables, string tables, animation and COF parsers, and decompressors for a classic action role-playing game's data files."""

__version__ = "0.1.0"