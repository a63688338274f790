"""Utilities package for the PriceMe pricing application."""
