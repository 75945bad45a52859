"""pricemovers: top-N price increase and decrease reports over streamed CSV data."""

__version__ = "0.1.0"
