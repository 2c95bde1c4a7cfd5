"""Building blocks for filtering OpenStreetMap data: OSM records, box index, id set, turn restrictions, XML writing and value conversions."""

__version__ = "0.1.0"