"""Job portal: job listings, applications and scripted AI interviews."""

__version__ = "1.0.0"
