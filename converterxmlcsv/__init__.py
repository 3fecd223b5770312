"""Convert commission and voucher XML exports to CSV."""

__version__ = "0.1.0"
