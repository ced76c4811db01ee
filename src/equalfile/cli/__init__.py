"""Command line front end for equalfile."""
